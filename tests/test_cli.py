from pathlib import Path

from tests.infrastructure.cli_utils import jload, run_cli
from tests.infrastructure.file_utils import write, write_config, write_markup


def test_compile_file(tmp_path: Path):
    write_markup(tmp_path, "page.wxml", '<button bindtap="{{onTap}}" disabled>Go</button>')
    cp = run_cli(tmp_path, "compile", "page.wxml")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == '<Button onclick="onTap" disabled="true">Go</Button>\n'


def test_compile_stdin(tmp_path: Path):
    cp = run_cli(tmp_path, "compile", input="<!-- note --><text>hi</text>")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == "<Text>hi</Text>\n"


def test_compile_to_output_file(tmp_path: Path):
    write_markup(tmp_path, "page.wxml", "<my-icon/>")
    cp = run_cli(tmp_path, "compile", "page.wxml", "-o", "page.jsx")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == ""
    assert (tmp_path / "page.jsx").read_text(encoding="utf-8") == "<My-icon/>\n"


def test_multiple_roots_warn(tmp_path: Path):
    cp = run_cli(tmp_path, "compile", input="<text>a</text><text>b</text>")
    assert cp.returncode == 0
    assert cp.stdout == "<Text>a</Text>\n"
    assert "[WARNING]" in cp.stderr


def test_tokens_json(tmp_path: Path):
    cp = run_cli(tmp_path, "tokens", input='<view a="{{x}}">hi</view>')
    assert cp.returncode == 0, cp.stderr
    data = jload(cp.stdout)
    assert [t["kind"] for t in data] == ["OPEN_TAG", "TEXT", "CLOSE_TAG"]
    assert data[0]["attributes"][0] == {
        "kind": "ATTRIBUTE", "value": "a", "raw_value": "{{x}}",
        "line": 1, "column": 7, "offset": 6,
    }
    assert data[1]["column"] == 17


def test_tree_json(tmp_path: Path):
    cp = run_cli(tmp_path, "tree", input="<view><text>a</text>b</view>")
    assert cp.returncode == 0, cp.stderr
    data = jload(cp.stdout)
    assert data["value"] == "view"
    assert [c["kind"] for c in data["children"]] == ["OPEN_TAG", "TEXT"]
    assert data["children"][0]["children"][0]["value"] == "a"


def test_build_reports_json(tmpproj: Path):
    write_config(tmpproj, """
        src: src
        out: dist
    """)
    cp = run_cli(tmpproj, "build")
    assert cp.returncode == 0, cp.stderr
    report = jload(cp.stdout)
    assert report["ok"] is True
    assert report["compiled"] == ["components/card.jsx", "pages/about.jsx", "pages/index.jsx"]
    assert (tmpproj / "dist" / "pages" / "index.jsx").is_file()


def test_build_with_failures(tmpproj: Path):
    write_config(tmpproj, """
        src: src
        fail_fast: false
    """)
    write_markup(tmpproj, "src/bad.wxml", "<view")
    cp = run_cli(tmpproj, "build")
    assert cp.returncode == 1
    report = jload(cp.stdout)
    assert report["failed"][0]["path"] == "bad.wxml"


def test_invalid_config(tmp_path: Path):
    write(tmp_path / "custom.yaml", "bogus: 1\n")
    cp = run_cli(tmp_path, "build", "-c", "custom.yaml")
    assert cp.returncode == 2
    assert "bogus" in cp.stderr


def test_compile_error_exit_code(tmp_path: Path):
    cp = run_cli(tmp_path, "compile", input="<view class=x></view>")
    assert cp.returncode == 2
    assert cp.stdout == ""
    assert "Expected quote" in cp.stderr
    assert "1:13" in cp.stderr
    assert "Traceback" not in cp.stderr


def test_missing_source_file(tmp_path: Path):
    cp = run_cli(tmp_path, "compile", "nope.wxml")
    assert cp.returncode == 2
    assert "not found" in cp.stderr


def test_version(tmp_path: Path):
    cp = run_cli(tmp_path, "--version")
    assert cp.returncode == 0
    assert cp.stdout.startswith("wxjsx ")
