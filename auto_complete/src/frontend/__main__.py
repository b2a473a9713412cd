from __future__ import annotations
import argparse, os, sys, json
from termcomplete import Engine, CatalogueFormatError, UnsortedCatalogueError
from termcomplete import config as CFG

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_table(rows) -> None:
    if not rows:
        print(_c("(no matches)", "2;37")); return
    print(_c("#   Weight          Term", "1;37"))
    for i, t in enumerate(rows, 1):
        print(f"{i:<3} {t.weight:<15g} {t.text}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Weighted term autocomplete CLI")
    p.add_argument("--terms", required=True, help="Catalogue file (<count> then '<weight> <text>' rows)")
    p.add_argument("-k", type=int, default=None, help="Top-K results (default: config TOP_K; 0 or less: show all)")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after loading")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--max-chars", type=int, default=None, help="Truncate term text on load")
    p.add_argument("--check-sorted", action="store_true", help="Verify catalogue order after loading")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    k = args.k if args.k is not None else CFG.TOP_K
    top_k = k if k > 0 else None

    eng = Engine()
    try:
        try:
            eng.load(args.terms, max_chars=args.max_chars,
                     check_sorted=args.check_sorted or None, verbose=args.verbose)
        except (FileNotFoundError, CatalogueFormatError, UnsortedCatalogueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        def run_query(q: str) -> None:
            rows = eng.complete(q, top_k=top_k)
            if args.json:
                print(json.dumps([t.as_dict() for t in rows], ensure_ascii=False, indent=2))
            else:
                _print_table(rows)

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print(f"{eng.size:,} terms loaded. Type a prefix (empty line to exit).")
            while True:
                try:
                    q = input("> ")
                except (EOFError, KeyboardInterrupt):
                    print(); break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
