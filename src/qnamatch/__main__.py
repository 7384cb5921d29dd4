from __future__ import annotations
import argparse, json
from . import config as CFG
from .engine import Engine
from .normalize import normalize_text, sorted_tokens, tokenize

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Question/answer matcher CLI")
    p.add_argument("--corpus", default=None,
                   help=f"JSON corpus path (default: ${CFG.CORPUS_ENV} or {CFG.DEFAULT_CORPUS_PATH})")
    p.add_argument("--threshold", type=int, default=CFG.THRESHOLD, help="Minimum score (exclusive), 0..100")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--best", action="store_true", help="Print only the best variant")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--echo", action="store_true", help="Echo normalized query tokens")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    try:
        eng = Engine.load(args.corpus, threshold=args.threshold, verbose=args.verbose)
    except ValueError as e:
        p.error(str(e))

    try:
        def run_query(q: str):
            if args.echo:
                print(f"[query] {sorted_tokens(tokenize(normalize_text(q)))!r}")
            if args.best:
                best = eng.find_best_match(q)
                if args.json:
                    print(json.dumps({"variant": best, "originalText": q}, ensure_ascii=False))
                else:
                    print(best if best is not None else "(no matches)")
                return
            rows = eng.find_all_matches(q)
            if args.json:
                print(json.dumps(eng.get_answer(q).to_dict(), ensure_ascii=False, indent=2))
                return
            if not rows:
                print("(no matches)"); return
            print("#  Score  Variant")
            for i, r in enumerate(rows, 1):
                print(f"{i:<2} {r.score:<6} {r.variant}")

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a question (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
