"""
Shared test infrastructure for wxjsx.

Modules:
- file_utils: Utilities for creating source trees
- cli_utils: Running the CLI as a subprocess
"""

from .file_utils import write, write_markup, write_config
from .cli_utils import run_cli, jload

__all__ = [
    # File utilities
    "write", "write_markup", "write_config",
    # CLI utilities
    "run_cli", "jload",
]
