from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Version of the installed distribution.
    Has no imports from the rest of the package (avoids cycles).
    """
    try:
        return metadata.version("wxjsx")
    except metadata.PackageNotFoundError:
        return "0.0.0"

__all__ = ["tool_version"]
