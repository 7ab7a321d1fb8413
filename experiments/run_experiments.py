from __future__ import annotations

import argparse
import csv
import os
from typing import Dict, Any, List, Optional

import matplotlib.pyplot as plt

from greedycol.graph_io import GraphFormatError, read_col
from greedycol.ordering import ASC, ASC_SHUFFLE, DESC, DESC_SHUFFLE, NONE, SHUFFLE
from greedycol.trials import TrialConfig, TrialResult, run_trials


def ensure_dirs(*dirs: str):
    for d in dirs:
        os.makedirs(d, exist_ok=True)


def make_schedule(desc_shuffle: int, asc_shuffle: int, shuffle: int):
    return [
        (NONE, 1),
        (ASC, 1),
        (DESC, 1),
        (DESC_SHUFFLE, desc_shuffle),
        (ASC_SHUFFLE, asc_shuffle),
        (SHUFFLE, shuffle),
    ]


def save_csv(path: str, rows: List[Dict[str, Any]]):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0].keys()), delimiter=";")
        w.writeheader()
        w.writerows(rows)


def save_color_classes(path: str, tag: str, res: TrialResult):
    """Append the best attempt's color classes: one 'tag;color;v1,v2,...' line per color."""
    with open(path, "a", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter=";")
        for color, members in enumerate(res.best.color_classes(), start=1):
            w.writerow([tag, color, ",".join(str(v) for v in members)])


def plot_history(path: str, y: List[float], xlabel: str, ylabel: str, title: str):
    plt.figure()
    plt.plot(y)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    plt.title(title)
    plt.savefig(path, dpi=200)
    plt.close()


def run_instance(graph_path: str, cfg: TrialConfig, plots_dir: Optional[str]) -> Optional[Dict[str, Any]]:
    tag = os.path.splitext(os.path.basename(graph_path))[0]

    try:
        graph = read_col(graph_path)
    except (GraphFormatError, OSError) as exc:
        print(f"[{tag}] skipped: {exc}")
        return None

    res = run_trials(graph, cfg)
    print(
        f"[{tag}] colors={res.best_n_colors} attempts={res.attempts} "
        f"best_strategy={res.best.strategy} time={res.total_time:.4f}s"
    )

    if plots_dir is not None:
        out_png = os.path.join(plots_dir, f"{tag}_best_colors.png")
        plot_history(
            out_png,
            res.best_history,
            xlabel="Attempt",
            ylabel="Best colors so far",
            title=f"{tag} greedy trials | best colors={res.best_n_colors}",
        )
        print(f"Saved: {out_png}")

    return {
        "tag": tag,
        "result": res,
        "row": {
            "instance": tag,
            "vertices": graph.n_vertices,
            "edges": len(graph.edges),
            "attempts": res.attempts,
            "best_colors": res.best_n_colors,
            "total_time": round(res.total_time, 6),
        },
    }


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--graph", required=True, nargs="+", help="Path(s) to .col files")
    parser.add_argument("--results_dir", default="results")
    parser.add_argument("--plots_dir", default="plots")
    parser.add_argument("--desc_shuffle", type=int, default=100, help="Repetitions of desc_shuffle")
    parser.add_argument("--asc_shuffle", type=int, default=70, help="Repetitions of asc_shuffle")
    parser.add_argument("--shuffle", type=int, default=100, help="Repetitions of full shuffle")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--no_plot", action="store_true")
    args = parser.parse_args(argv)

    plots_dir = None if args.no_plot else args.plots_dir
    ensure_dirs(args.results_dir, *([plots_dir] if plots_dir else []))

    cfg = TrialConfig(
        schedule=make_schedule(args.desc_shuffle, args.asc_shuffle, args.shuffle),
        seed=args.seed,
        workers=args.workers,
    )

    classes_path = os.path.join(args.results_dir, "color_classes.csv")
    if os.path.exists(classes_path):
        os.remove(classes_path)

    rows: List[Dict[str, Any]] = []
    for graph_path in args.graph:
        out = run_instance(graph_path, cfg, plots_dir)
        if out is None:
            continue
        rows.append(out["row"])
        save_color_classes(classes_path, out["tag"], out["result"])

    if not rows:
        print("No instance could be colored.")
        return

    out_csv = os.path.join(args.results_dir, "res.csv")
    save_csv(out_csv, rows)
    print(f"Saved: {out_csv}")
    print(f"Saved: {classes_path}")


if __name__ == "__main__":
    main()
