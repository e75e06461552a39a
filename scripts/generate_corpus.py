from __future__ import annotations

import argparse
from pathlib import Path

from urigrammar.testing import generate_corpus_file


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve()
    out_dir.mkdir(parents=True, exist_ok=True)
    p = out_dir / f"seed_{args.seed}_count_{args.count}.txt"
    p.write_text(generate_corpus_file(seed=args.seed, count=args.count), encoding="ascii")

    print(str(p))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
