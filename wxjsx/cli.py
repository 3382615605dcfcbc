from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .build import build_project
from .config import DEFAULT_CFG_FILE, load_config
from .dump import dumps as jdumps, node_to_dict, tokens_to_list
from .errors import WxjsxUserError
from .markup.lexer import MarkupLexer
from .markup.parser import MarkupParser
from .transform import transform
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wxjsx",
        description="Compile WXML markup into JSX-like component expressions",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--verbose", action="store_true", help="log progress to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_source(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "source",
            nargs="?",
            default="-",
            metavar="FILE|-",
            help="markup file, or - to read stdin (default)",
        )

    sp_compile = sub.add_parser("compile", help="compile one file and print the result")
    add_source(sp_compile)
    sp_compile.add_argument("-o", "--output", metavar="FILE", help="write the result to FILE")

    sp_tokens = sub.add_parser("tokens", help="token stream as JSON")
    add_source(sp_tokens)

    sp_tree = sub.add_parser("tree", help="node tree as JSON")
    add_source(sp_tree)

    sp_build = sub.add_parser("build", help=f"compile a source tree per {DEFAULT_CFG_FILE} (JSON report)")
    sp_build.add_argument(
        "-c", "--config",
        default=DEFAULT_CFG_FILE,
        metavar="FILE",
        help=f"configuration file (default: ./{DEFAULT_CFG_FILE})",
    )

    return p


def _setup_logging(verbose: bool) -> None:
    if os.environ.get("WXJSX_DEBUG"):
        level = logging.DEBUG
    else:
        level = logging.INFO if verbose else logging.WARNING
    root = logging.getLogger("wxjsx")
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise ValueError(f"Source file not found: {path}")
    return path.read_text(encoding="utf-8")


def main(argv: Optional[list[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        if ns.cmd == "compile":
            code = transform(_read_source(ns.source))
            if ns.output:
                Path(ns.output).write_text(code + "\n", encoding="utf-8")
            else:
                sys.stdout.write(code + "\n")
            return 0

        if ns.cmd == "tokens":
            tokens = MarkupLexer(_read_source(ns.source)).tokenize_all()
            sys.stdout.write(jdumps(tokens_to_list(tokens)))
            return 0

        if ns.cmd == "tree":
            tokens = MarkupLexer(_read_source(ns.source)).tokenize_all()
            root = MarkupParser(tokens).parse()
            sys.stdout.write(jdumps(node_to_dict(root)))
            return 0

        if ns.cmd == "build":
            cfg = load_config(Path(ns.config).resolve())
            report = build_project(cfg)
            sys.stdout.write(jdumps(report.to_dict()))
            return 0 if report.ok else 1

    except WxjsxUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
