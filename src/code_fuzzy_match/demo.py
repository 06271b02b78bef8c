# src/code_fuzzy_match/demo.py
import argparse
import json
import sys
from pathlib import Path

from rapidfuzz import fuzz


def rank(matcher, query, candidates, top_k=None):
    """Score every candidate, drop non-matches, sort best first.

    Equal scores fall back to overall similarity, then to the candidate text,
    so the order is stable for the interactive list.
    """
    from .utils import debug

    scored = []
    for cand in candidates:
        result = matcher.fuzzy_match(cand, query)
        if result is None:
            continue
        scored.append((result, fuzz.ratio(query, cand), cand))
        debug(f"{cand!r} -> {result.score} {list(result.positions)}", topic="demo")

    scored.sort(key=lambda item: (-item[0].score, -item[1], item[2]))
    if top_k is not None:
        scored = scored[:top_k]
    return [
        {"candidate": cand, "score": result.score, "positions": list(result.positions)}
        for result, _, cand in scored
    ]


def main(argv=None):
    """CLI demo: rank candidate strings (args or stdin lines) against a fuzzy query."""
    from .fuzzy import Matcher, load_weights
    from .utils import enable

    parser = argparse.ArgumentParser(
        prog="cfm-demo",
        description="Rank candidates against a fuzzy query, best match first.",
    )
    parser.add_argument("query", help="Query to match (e.g. bro fox)")
    parser.add_argument(
        "candidates",
        nargs="*",
        help="Candidates to rank; read one per line from stdin when omitted",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--top-k",
        type=int,
        default=10,
        dest="top_k",
        help="Max matches to return",
    )
    parser.add_argument(
        "--paths",
        action="store_true",
        help="Treat '/' and '\\' as the same character",
    )
    parser.add_argument(
        "--weights",
        type=Path,
        default=None,
        help="JSON file with score weights (any extension)",
    )

    args = parser.parse_args(argv)
    if args.debug:
        enable("demo")

    candidates = args.candidates or [line.rstrip("\n") for line in sys.stdin if line.strip()]

    try:
        weights = None
        if args.weights is not None:
            weights = load_weights(args.weights.name, base_dir=args.weights.resolve().parent)
        matcher = Matcher(weights, match_path_separators=args.paths)
        matches = rank(matcher, args.query, candidates, top_k=args.top_k)
        print(json.dumps({"query": args.query, "matches": matches}, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
