from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write, write_markup


@pytest.fixture
def tmpproj(tmp_path: Path):
    """Small mini-program tree: two pages, one component, sources excluded by default."""
    root = tmp_path
    write_markup(root, "src/pages/index.wxml", '<view wx:for="{{list}}">{{item}}</view>')
    write_markup(root, "src/pages/about.wxml", "<!-- about --><text>About</text>")
    write_markup(root, "src/components/card.wxml", '<view bindtap="{{open}}"><slot/></view>')
    write_markup(root, "src/node_modules/lib/skip.wxml", "<view></view>")
    write(root / "src" / "README.md", "# not markup\n")
    return root
