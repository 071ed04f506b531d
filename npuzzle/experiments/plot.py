#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import numpy as np
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from npuzzle.experiments.summarize import load_many

def agg_mean(df, metric):
    """{(algo, heur): (depths, means, stds)} for one metric."""
    series = {}
    sub = df.dropna(subset=[metric])
    for (algo, heur), grp in sub.groupby(["algorithm", "heuristic"]):
        stats = grp.groupby("depth")[metric].agg(["mean", "std"]).sort_index()
        xs = stats.index.to_numpy(dtype=float)
        ys = stats["mean"].to_numpy(dtype=float)
        es = np.nan_to_num(stats["std"].to_numpy(dtype=float))
        series[(algo, heur)] = (xs, ys, es)
    return series

def plot_metric(ax, df, metric):
    series = agg_mean(df, metric)
    keys = sorted(series)
    # spread curves a little so error bars don't overlap
    offsets = np.linspace(-0.15, 0.15, len(keys)) if len(keys) > 1 else [0.0]
    for off, key in zip(offsets, keys):
        xs, ys, es = series[key]
        ax.errorbar(xs + off, ys, yerr=es, marker="o", capsize=3, label=f"{key[0]} | {key[1]}")
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± std)")
    ax.grid(True)
    if keys:
        ax.legend()

def save_fig(fig, outdir: Path, name: str):
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return 0

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["explored", "path_len", "time_sec"]):
        plot_metric(ax, df, metric)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    if args.show:
        plt.show()
    plt.close(fig)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
