#!/usr/bin/env python3
"""
Time Algorithm C over a range of path lengths k.

For each k the estimator runs --repeat times on the same graph; the mean wall
time in milliseconds is written as one "k, ms" line per k.

Usage:
    python3 bench_k_sweep.py GRAPH [--format tsv|g6] [--k-min 2] [--k-max 8]
                                   [--eps 0.8] [--repeat 3] [--out bench_k.txt]
"""

import argparse
import logging
import time

from extensor_coding import estimate_walk_count, read_graph6, read_tsv


def main():
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("graph", help="adjacency file")
    ap.add_argument("--format", choices=("tsv", "g6"), default="tsv")
    ap.add_argument("--k-min", type=int, default=2)
    ap.add_argument("--k-max", type=int, default=8)
    ap.add_argument("--eps", type=float, default=0.8)
    ap.add_argument("--repeat", type=int, default=3)
    ap.add_argument("--processes", type=int, default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--out", default="bench_k.txt")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    adj = read_graph6(args.graph) if args.format == "g6" else read_tsv(args.graph)
    print(f"Loaded {args.graph}: {adj.num_rows}x{adj.num_cols}, {sum(adj.data)} edges")

    rows = []
    for k in range(args.k_min, args.k_max + 1):
        times = []
        estimate = 0.0
        for _ in range(args.repeat):
            start = time.perf_counter()
            estimate = estimate_walk_count(
                adj, k, args.eps, seed=args.seed, processes=args.processes
            )
            times.append((time.perf_counter() - start) * 1000.0)
        mean_ms = sum(times) / len(times)
        print(f"  k={k}: {mean_ms:.1f} ms  (last estimate {estimate:.3f})")
        rows.append((k, mean_ms))

    with open(args.out, "w") as f:
        for k, ms in rows:
            f.write(f"{k}, {ms}\n")
    print(f"Wrote {args.out}")


if __name__ == "__main__":
    main()
