#!/usr/bin/env python3
import argparse, glob, os
from pathlib import Path
import pandas as pd

METRICS = ["path_len", "explored", "expanded", "max_depth", "time_sec"]

def load_many(patterns):
    dfs = []
    for pat in patterns:
        for fn in sorted(glob.glob(pat)):
            df = pd.read_csv(fn)
            df["__src__"] = os.path.basename(fn)
            dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    # Keep clean rows only
    term = df["termination"] if "termination" in df.columns else pd.Series("ok", index=df.index)
    df = df[term.fillna("ok") == "ok"].copy()

    for c in ["n", "depth", "seed"] + METRICS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean of every metric per (algorithm, heuristic, depth), plus a count."""
    keys = [c for c in ("algorithm", "heuristic", "depth") if c in df.columns]
    metrics = [m for m in METRICS if m in df.columns]
    g = df.groupby(keys, dropna=False)
    out = g[metrics].mean()
    out["runs"] = g.size()
    return out.reset_index()

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs (mean per algorithm/heuristic/depth).")
    ap.add_argument("csv", nargs="+", help="CSV files or glob patterns")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return 0
    table = summarize(df)
    with pd.option_context("display.max_rows", None, "display.width", 120):
        print(table.to_string(index=False, float_format=lambda x: f"{x:.3f}"))
    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
