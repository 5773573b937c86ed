#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import bikram
from bikram.formatting import MONTH_NAMES


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "bikram[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "bikram[diagnostics]"') from e


def month_length_matrix(np, calendar: str, start_year: int, end_year: int):
    """(years x 12) int array of month lengths."""
    table = bikram.get_calendar(calendar).table
    rows = [table.entry(y).month_lengths for y in range(start_year, end_year + 1)]
    return np.array(rows, dtype=int)


def summarize(np, L) -> List[str]:
    lines = ["Month      min  max  mean"]
    for m in range(12):
        col = L[:, m]
        lines.append(f"{MONTH_NAMES['en'][m]:<9}  {col.min():>3}  {col.max():>3}  {col.mean():.3f}")
    years = L.sum(axis=1)
    lines.append("")
    lines.append(f"365-day years: {int(np.count_nonzero(years == 365))}")
    lines.append(f"366-day years: {int(np.count_nonzero(years == 366))}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Month-length chart (years x months) of the BS table.")
    p.add_argument("--calendar", default="default")
    p.add_argument("--start-year", type=int, default=None, help="Default: first table year.")
    p.add_argument("--end-year", type=int, default=None, help="Default: last table year.")
    p.add_argument("--out", default="bs_month_lengths.png")
    p.add_argument("--title", default="Bikram Sambat month lengths")
    p.add_argument("--no-plot", action="store_true", help="Print the summary only.")
    args = p.parse_args(argv)

    np = _need_numpy()

    lo = args.start_year if args.start_year is not None else bikram.min_supported_year(calendar=args.calendar)
    hi = args.end_year if args.end_year is not None else bikram.max_supported_year(calendar=args.calendar)
    if hi < lo:
        raise SystemExit("--end-year must be >= --start-year")

    L = month_length_matrix(np, args.calendar, lo, hi)
    for line in summarize(np, L):
        print(line)

    if args.no_plot:
        return 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(16, 3.6))

    x_edges = np.arange(lo - 0.5, hi + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    mesh = ax.pcolormesh(
        x_edges,
        y_edges,
        L.T,
        shading="flat",
        cmap="viridis",
        vmin=29, vmax=32,
        edgecolors="0.88",
        linewidth=0.4,
    )
    ax.set_xlim(lo - 0.5, hi + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_yticks(list(range(1, 13)))
    ax.set_yticklabels(MONTH_NAMES["en"])
    ax.set_xlabel("BS year")

    cbar = fig.colorbar(mesh, ax=ax, ticks=[29, 30, 31, 32])
    cbar.set_label("days")

    ax.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
