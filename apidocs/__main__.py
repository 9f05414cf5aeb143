"""Entry point: python -m apidocs

Reads spec/runtime-api.json, generates generated/runtime-api.lua.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .codegen import OUTPUT_DIR, OUTPUT_NAME, generate, write_output
from .config import DEFAULT_API_BASE, DEFAULT_KNOWN_BUILTINS, GeneratorConfig
from .errors import ApiDocsError, SchemaError
from .loader import DOCS_PATH, load_docs

logger = logging.getLogger("apidocs")


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apidocs",
        description="Generate EmmyLua annotations from the runtime API JSON document",
    )
    parser.add_argument("--docs", type=Path, default=DOCS_PATH)
    parser.add_argument("--output", type=Path, default=OUTPUT_DIR / OUTPUT_NAME)
    parser.add_argument("--custom", type=Path, default=None, help="Lua appendix copied verbatim")
    parser.add_argument("--api-base", default=DEFAULT_API_BASE)
    parser.add_argument(
        "--known-builtin", action="append", default=None,
        help="Builtin type the language server already defines (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_argument_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GeneratorConfig(
        runtime_api_base=args.api_base,
        known_builtins=frozenset(args.known_builtin) if args.known_builtin else DEFAULT_KNOWN_BUILTINS,
    )
    custom = args.custom.read_text(encoding="utf-8") if args.custom else ""

    try:
        docs = load_docs(args.docs)
        text = generate(docs, config, custom)
    except SchemaError as e:
        logger.error("Malformed API document %s: %s", args.docs, e)
        return 1
    except ApiDocsError as e:
        logger.error("Generation failed: %s", e)
        return 1

    output_path = write_output(text, args.output)
    print(f"Generated {output_path} ({len(docs['classes'])} classes, {len(docs['concepts'])} concepts)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
