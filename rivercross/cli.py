# rivercross/cli.py
from __future__ import annotations
import argparse, csv, os
from typing import List, Optional, Sequence

from .state import WorldState, InvalidState, initial_state, describe_move
from .search import STRATEGIES
from .planners import run_algorithm, RunStats
from .viz import draw_solution_png

def format_stats(name: str, s: RunStats) -> str:
    return (f"{name:8s} | reached={s.reached!s:5s} | crossings={s.crossings:3d} | "
            f"expansions={s.expansions:5d} | time={s.elapsed_sec*1000:7.2f} ms")

def format_path(path: List[WorldState]) -> List[str]:
    lines = [f"{0:3d}. {path[0]}   (start)"]
    for i in range(1, len(path)):
        lines.append(f"{i:3d}. {path[i]}   {describe_move(path[i - 1], path[i])}")
    return lines

def _start_from_args(args: argparse.Namespace) -> WorldState:
    if args.start is not None:
        return args.start
    return initial_state(args.missionaries, args.cannibals)

def _state_arg(text: str) -> WorldState:
    try:
        return WorldState.parse(text)
    except InvalidState as e:
        raise argparse.ArgumentTypeError(str(e))

# -------- subcommands --------

def cmd_solve(args: argparse.Namespace) -> None:
    start = _start_from_args(args)
    names = list(STRATEGIES) if args.alg == "all" else [args.alg]
    for name in names:
        st = run_algorithm(name, start)
        print(format_stats(name, st))
        if not st.reached:
            print("   no solution was found!")
            continue
        for line in format_path(st.path):
            print("  ", line)
        if args.png:
            draw_solution_png(st.path, os.path.join(args.png, f"{name}.png"))

def cmd_bench(args: argparse.Namespace) -> None:
    rows = []
    for n in range(1, args.max_size + 1):
        start = initial_state(n, n)
        for name in STRATEGIES:
            st = run_algorithm(name, start)
            print(f"{n}x{n} :: {format_stats(name, st)}")
            if args.out and st.reached:
                draw_solution_png(st.path, os.path.join(args.out, f"{n}x{n}_{name}.png"))
            rows.append({
                "missionaries": n,
                "cannibals": n,
                "alg": name,
                "reached": st.reached,
                "crossings": st.crossings,
                "expansions": st.expansions,
                "time_sec": round(st.elapsed_sec, 6),
            })
    if args.csv and rows:
        d = os.path.dirname(args.csv)
        if d:
            os.makedirs(d, exist_ok=True)
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Missionaries and cannibals (BFS, DFS, greedy, A*)")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("solve", help="solve one instance and print the crossings")
    s.add_argument("--alg", choices=list(STRATEGIES) + ["all"], default="all")
    s.add_argument("--missionaries", type=int, default=3)
    s.add_argument("--cannibals", type=int, default=3)
    s.add_argument("--start", type=_state_arg, default=None,
                   help="explicit start state '<lm> <lc> <rm> <rc> <left|right>'")
    s.add_argument("--png", type=str, default="", help="directory for one PNG per solution")
    s.set_defaults(func=cmd_solve)

    b = sub.add_parser("bench", help="run every algorithm on NxN instances, N=1..max-size")
    b.add_argument("--max-size", type=int, default=4)
    b.add_argument("--csv", type=str, default="")
    b.add_argument("--out", type=str, default="", help="directory for one PNG per solved run")
    b.set_defaults(func=cmd_bench)

    return p

def main(argv: Optional[Sequence[str]] = None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    if getattr(args, "missionaries", 0) < 0 or getattr(args, "cannibals", 0) < 0:
        ap.error("counts must be non-negative")
    args.func(args)

if __name__ == "__main__":
    main()
