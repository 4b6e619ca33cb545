# graphstar/plots/plotting.py
# Bar charts comparing A* runs: nodes expanded, path cost, time taken and peak memory, one panel each.
from __future__ import annotations
import io
import math

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def _val(row, key):
    v = row.get(key)
    return 0 if v is None or (isinstance(v, float) and math.isinf(v)) else v


def bar_compare(rows, title="A* runs"):
    names = [r["algo"] for r in rows]
    nodes = [_val(r, "nodes_expanded") for r in rows]
    costs = [_val(r, "cost") for r in rows]
    times = [_val(r, "time_s") for r in rows]
    mems  = [_val(r, "peak_kb") for r in rows]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, costs); axs[1].set_title("Path Cost"); axs[1].tick_params(axis='x', rotation=45)
    axs[2].bar(names, times); axs[2].set_title("Time (s)"); axs[2].tick_params(axis='x', rotation=45)
    axs[3].bar(names, mems); axs[3].set_title("Peak Memory (KB)"); axs[3].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig


def bar_single(rows, metric, title, ylabel):
    fig, ax = plt.subplots(figsize=(6, 4))
    names = [r["algo"] for r in rows]
    vals = [_val(r, metric) for r in rows]
    x = list(range(len(names)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(names, rotation=20, ha="right")

    top = max(vals) if vals else 0
    for xi, v in zip(x, vals):
        if isinstance(v, float) and v < 0.01:
            label = f"{v:.4f}"
        elif isinstance(v, float):
            label = f"{v:.3f}"
        else:
            label = f"{v}"
        ax.text(xi, v + 0.01 * (top or 1), label, ha="center", va="bottom", fontsize=8)
    fig.tight_layout()
    return fig


def fig_to_png_bytes(fig, dpi=160):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi)
    plt.close(fig)
    return buf.getvalue()
