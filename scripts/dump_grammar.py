from __future__ import annotations

from urigrammar.uri import build_uri_grammar


def main() -> None:
    g = build_uri_grammar()
    print(f"rules: {len(g.rules)} (start: {g.start})")
    width = max(len(name) for name in g.names())
    for name, rule in g.rules.items():
        print(f"{name:>{width}} = {rule.rule}")


if __name__ == "__main__":
    main()
