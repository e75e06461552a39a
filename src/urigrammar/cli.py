from __future__ import annotations

import argparse
import json
import logging
import sys

from . import ast as A
from .api import match_rule, parse_uri, rule_names
from .errors import ParseError
from .format import to_jsonable
from .uri import START


def _to_jsonable(obj):
    if isinstance(obj, (A.AbsoluteUri, A.RelativeUri, A.FragmentRef)):
        return to_jsonable(obj)
    if isinstance(obj, A.UriPart):
        return [type(obj).__name__, obj.value.decode("ascii")]
    if isinstance(obj, bytes):
        return obj.decode("ascii")
    if isinstance(obj, tuple):
        return [_to_jsonable(x) for x in obj]
    return obj


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="urigrammar", description="Parse RFC 2396 URI references")
    ap.add_argument("uris", nargs="+", help="URI references to parse")
    ap.add_argument(
        "--rule",
        default=START,
        choices=rule_names(),
        help=f"Grammar rule to run (default: {START})",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Require the whole argument to be one URI reference",
    )
    ap.add_argument("--json", action="store_true", help="Print results as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if args.strict and args.rule != START:
        ap.error("--strict only applies to the default rule")

    status = 0
    results = []
    for i, text in enumerate(args.uris):
        source = f"<arg {i}>"
        try:
            if args.strict:
                value: object = parse_uri(text, source=source)
                consumed = len(text)
            else:
                m = match_rule(args.rule, text, source=source)
                if m is None or (args.rule == START and m.value is None):
                    value, consumed = None, None
                    status = 1
                else:
                    value, consumed = m.value, len(m.span)
        except ParseError as e:
            print(str(e), file=sys.stderr)
            status = 1
            continue
        results.append({"input": text, "consumed": consumed, "value": _to_jsonable(value)})
        if not args.json:
            if consumed is None:
                print(f"{text}\tno match")
            else:
                print(f"{text}\t{consumed}\t{value!r}")

    if args.json:
        print(json.dumps(results, indent=2, sort_keys=True))
    return status
