"""
Command-line interface for the list recognition engine.

Usage:
  # Recognize items from a text file produced by an OCR engine
  lista-ocr recognize ocr_output.txt

  # Read from stdin, print JSON, trace corrections
  cat ocr_output.txt | lista-ocr recognize - --json --verbose

  # Correct single item names
  lista-ocr correct Abacatee Leote
"""

import argparse
import json
import sys
from typing import List, Optional

from .config import ConfigError, load_config
from .grocery_corrector import correct_item_name
from .pipeline import recognize_items


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def _cmd_recognize(args, config) -> int:
    raw_text = _read_input(args.input)
    result = recognize_items(raw_text, config, verbose=args.verbose)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    for quantity, name in result.pairs():
        print(f"{quantity}\t{name}")
    print(result.feedback_message)
    return 0


def _cmd_correct(args, config) -> int:
    for word in args.words:
        corrected, was_corrected, distance = correct_item_name(word, config)
        status = f"CORRECTED, distance={distance}" if was_corrected else "KEPT"
        print(f"'{word}' -> '{corrected}' ({status})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lista-ocr",
        description="Turn OCR'd shopping-list text into corrected list items",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--config", "-c", default=None,
        help="Path to YAML config file (default: $LISTA_OCR_CONFIG, else built-in defaults)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    recognize = subparsers.add_parser("recognize", help="Segment and correct OCR text")
    recognize.add_argument("input", help="Text file with OCR output, or '-' for stdin")
    recognize.add_argument("--json", action="store_true", help="Print the result as JSON")
    recognize.add_argument("--verbose", "-v", action="store_true", help="Trace each correction")
    recognize.set_defaults(handler=_cmd_recognize)

    correct = subparsers.add_parser("correct", help="Correct individual item names")
    correct.add_argument("words", nargs="+", help="Item names to correct")
    correct.set_defaults(handler=_cmd_correct)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        return args.handler(args, config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: Input is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Could not read input: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
