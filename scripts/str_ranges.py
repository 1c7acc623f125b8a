#!/usr/bin/env python3
"""Measure strings and compute multi-unit ranges from the command line.

Usage:
    # Lengths of each argument in bytes / UTF-16 / code points / graphemes
    python3 scripts/str_ranges.py measure "👨‍👩‍👧‍👦" "a"

    # Consecutive ranges for strings laid end to end
    python3 scripts/str_ranges.py ranges "👨‍👩‍👧‍👦" "a" --format text

    # Continue after an existing range
    python3 scripts/str_ranges.py ranges "two" --after "4:4"

    # Slice by a range literal (byte coordinate)
    python3 scripts/str_ranges.py slice "one two" "4:3"

    # Normalize range literals, or classify how two spans overlap
    python3 scripts/str_ranges.py parse "4:4" "31:25|17:11|13:7|7:1"
    python3 scripts/str_ranges.py classify "5:5" "6:3"

The default output format comes from STR_LEN_FORMAT (json or text).
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import asdict

import orjson

from str_len import (
    RangeVector,
    StrLenError,
    classify,
    format_range,
    measure,
    parse_range,
    ranges,
    slice_text,
    to_dict,
)

log = logging.getLogger("str_ranges")

_FORMATS = ("json", "text")


def dump_json(obj: object) -> None:
    sys.stdout.buffer.write(orjson.dumps(obj, option=orjson.OPT_INDENT_2))
    sys.stdout.buffer.write(b"\n")


def build_parser() -> argparse.ArgumentParser:
    default_format = os.environ.get("STR_LEN_FORMAT", "json")
    if default_format not in _FORMATS:
        default_format = "json"

    parser = argparse.ArgumentParser(
        description="Measure strings and compute byte/UTF-16/code point/grapheme ranges."
    )
    parser.add_argument(
        "--format",
        choices=_FORMATS,
        default=default_format,
        help="Output format (default: $STR_LEN_FORMAT or json).",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="In text output, drop trailing fields that repeat the previous one.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_measure = sub.add_parser("measure", help="Length of each string in all units.")
    p_measure.add_argument("texts", nargs="+")

    p_ranges = sub.add_parser("ranges", help="Consecutive ranges for the strings.")
    p_ranges.add_argument("texts", nargs="+")
    p_ranges.add_argument(
        "--after",
        default=None,
        help="Range literal the first string follows (default: start of string).",
    )

    p_slice = sub.add_parser("slice", help="Slice TEXT by a range literal.")
    p_slice.add_argument("text")
    p_slice.add_argument("range")

    p_parse = sub.add_parser("parse", help="Normalize range literals.")
    p_parse.add_argument("literals", nargs="+")

    p_classify = sub.add_parser("classify", help="Overlap of range B relative to A.")
    p_classify.add_argument("a")
    p_classify.add_argument("b")
    return parser


def _emit_ranges(items: list[RangeVector], args: argparse.Namespace) -> None:
    if args.format == "text":
        for rng in items:
            print(format_range(rng, compact=args.compact))
    else:
        dump_json([to_dict(rng) for rng in items])


def _run(args: argparse.Namespace) -> None:
    if args.command == "measure":
        lengths = [measure(t) for t in args.texts]
        if args.format == "text":
            for length in lengths:
                print(
                    f"byte={length.byte} utf16={length.utf16} "
                    f"codepoint={length.codepoint} grapheme={length.grapheme}"
                )
        else:
            dump_json([asdict(length) for length in lengths])
    elif args.command == "ranges":
        after = parse_range(args.after) if args.after else None
        log.debug("computing %d ranges after %s", len(args.texts), after)
        _emit_ranges(ranges(args.texts, after=after), args)
    elif args.command == "slice":
        part = slice_text(args.text, parse_range(args.range))
        if args.format == "text":
            print(part)
        else:
            dump_json({"text": part})
    elif args.command == "parse":
        _emit_ranges([parse_range(lit) for lit in args.literals], args)
    elif args.command == "classify":
        kind = classify(parse_range(args.a), parse_range(args.b))
        if args.format == "text":
            print(kind)
        else:
            dump_json({"a": args.a, "b": args.b, "overlap": kind})


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        _run(args)
    except StrLenError as exc:
        log.error("%s", exc)
        sys.exit(2)


if __name__ == "__main__":
    main()
