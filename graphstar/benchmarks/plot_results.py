# graphstar/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import json
import math
from pathlib import Path

from ..plots.plotting import bar_compare, bar_single, fig_to_png_bytes

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"


def load_rows(path: Path = RESULTS_JSON):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m graphstar.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)


def fmt_table(rows):
    # Markdown table
    lines = [
        "| Graph | Cost | Path Length | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('path_len'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def render(results: Path, out_dir: Path):
    rows = load_rows(results)
    out_dir.mkdir(parents=True, exist_ok=True)

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    charts = [
        ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
        ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
        ("cost", "Path Cost", "cost", "cost.png"),
    ]
    written = [md_path]
    for metric, title, ylabel, fname in charts:
        fig = bar_single(_sorted(rows, metric), metric, title, ylabel)
        path = out_dir / fname
        path.write_bytes(fig_to_png_bytes(fig))
        print(f"Wrote {path}")
        written.append(path)

    overview = out_dir / "overview.png"
    overview.write_bytes(fig_to_png_bytes(bar_compare(rows)))
    print(f"Wrote {overview}")
    written.append(overview)
    return written


def main(argv=None):
    ap = argparse.ArgumentParser(description="Turn results.json into a markdown table and bar charts.")
    ap.add_argument("--results", type=Path, default=RESULTS_JSON, help="results.json written by run_all")
    ap.add_argument("--out-dir", type=Path, default=HERE, help="where to write results.md and the PNGs")
    args = ap.parse_args(argv)
    render(args.results, args.out_dir)


if __name__ == "__main__":
    main()
