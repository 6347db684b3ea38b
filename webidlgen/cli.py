"""Command line entry point: webidl2 JSON in, MoonBit bindings out"""

import argparse
import difflib
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from .parser import ASTParser, ASTError
from .moonbit_generator import MoonBitGenerator

logger = logging.getLogger(__name__)

DEFAULT_INPUT = Path("idl_json") / "dom.json"
PRELUDE_FILE = "js_value.mbt"


def load_definitions(path: Path) -> list:
    return ASTParser.from_json(path.read_text(encoding="utf-8")).parse()


def is_up_to_date(path: Path, content: str) -> bool:
    """Print a diff and return False when the file on disk differs from `content`"""
    existing = path.read_text(encoding="utf-8") if path.exists() else ""
    if existing == content:
        return True
    diff = difflib.unified_diff(
        existing.splitlines(),
        content.splitlines(),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
        lineterm="",
    )
    print("\n".join(diff))
    return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate MoonBit bindings from webidl2 JSON")
    parser.add_argument("inputs", nargs="*",
                        help=f"webidl2 JSON files, merged in order (default: {DEFAULT_INPUT})")
    parser.add_argument("--output-dir", "-o", default="generated", help="Output directory")
    parser.add_argument("--output-name", default="",
                        help="Output file name (default: <first input stem>.mbt)")
    parser.add_argument("--only", action="append", metavar="NAME",
                        help="Generate only this definition (repeatable)")
    parser.add_argument("--prefix", default="webapi", help="FFI module prefix")
    parser.add_argument("--prelude", action="store_true",
                        help=f"Also write {PRELUDE_FILE} with JsValue and TJsValue")
    parser.add_argument("--check", action="store_true",
                        help="Do not write; exit 1 if generated files are out of date")
    parser.add_argument("--strict", action="store_true",
                        help="Exit 1 if any definition could not be merged or generated")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[list] = None) -> int:
    start_time = time.perf_counter()

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    inputs = [Path(p) for p in args.inputs] or [DEFAULT_INPUT]
    definitions = []
    for path in inputs:
        try:
            definitions.extend(load_definitions(path))
        except (OSError, ASTError) as exc:
            logger.error("Cannot read %s: %s", path, exc)
            return 1
    print(f"Loaded {len(definitions)} definitions")

    generator = MoonBitGenerator(definitions, args.prefix)
    print(f"Merged into {len(generator.definitions)} definitions")

    result = generator.generate(args.only)

    output_dir = Path(args.output_dir)
    output_name = args.output_name or f"{inputs[0].stem}.mbt"
    files = {output_name: generator.render(result)}
    if args.prelude:
        files[PRELUDE_FILE] = generator.generate_prelude()

    stale = 0
    for filename, content in files.items():
        path = output_dir / filename
        if args.check:
            if not is_up_to_date(path, content):
                print(f"Out of date: {path}")
                stale += 1
            continue
        output_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        print(f"Generated: {path}")

    print(f"Generated {len(result.blocks)} definitions, {len(result.diagnostics)} diagnostics")

    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")

    if stale:
        return 1
    if args.strict and result.diagnostics:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
