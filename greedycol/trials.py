from __future__ import annotations

import functools
import random
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .graph_io import GraphData
from .greedy import ColoringResult, greedy_coloring, verify_coloring
from .ordering import ASC, ASC_SHUFFLE, DESC, DESC_SHUFFLE, NONE, ORDERINGS, SHUFFLE, vertex_order


# Benchmark schedule: one pass of each deterministic ordering, then many
# shuffled passes since shuffles are the only source of diversity.
DEFAULT_SCHEDULE: List[Tuple[str, int]] = [
    (NONE, 1),
    (ASC, 1),
    (DESC, 1),
    (DESC_SHUFFLE, 100),
    (ASC_SHUFFLE, 70),
    (SHUFFLE, 100),
]


@dataclass
class TrialConfig:
    schedule: List[Tuple[str, int]] = field(default_factory=lambda: list(DEFAULT_SCHEDULE))
    seed: Optional[int] = None  # None: seeds drawn from OS entropy
    workers: int = 1


@dataclass
class TrialResult:
    best: ColoringResult
    best_n_colors: int
    total_time: float
    attempts: int
    best_history: List[int]


def timed(fn: Callable[..., ColoringResult]) -> Callable[..., ColoringResult]:
    """Store the wall-clock duration of an attempt in the result's `elapsed`."""
    @functools.wraps(fn)
    def wrapper(*args, **kwargs) -> ColoringResult:
        start = time.perf_counter()
        res = fn(*args, **kwargs)
        res.elapsed = time.perf_counter() - start
        return res
    return wrapper


@timed
def run_attempt(graph: GraphData, strategy: str, seed: Optional[int] = None) -> ColoringResult:
    rnd = random.Random(seed)
    order = vertex_order(graph, strategy, rnd)
    res = greedy_coloring(graph, order)
    res.strategy = strategy
    return res


def _validate(cfg: TrialConfig) -> None:
    if cfg.workers < 1:
        raise ValueError("workers must be >= 1")
    for strategy, reps in cfg.schedule:
        if strategy not in ORDERINGS:
            raise ValueError(f"schedule strategy must be one of {ORDERINGS}, got {strategy!r}")
        if reps < 0:
            raise ValueError(f"schedule repetitions must be >= 0, got {reps} for {strategy!r}")


def _plan(cfg: TrialConfig) -> List[Tuple[str, int]]:
    """One (strategy, seed) pair per attempt, in schedule order."""
    master = random.Random(cfg.seed)
    plan: List[Tuple[str, int]] = []
    for strategy, reps in cfg.schedule:
        for _ in range(reps):
            plan.append((strategy, master.getrandbits(32)))
    return plan


def run_trials(graph: GraphData, cfg: Optional[TrialConfig] = None) -> TrialResult:
    """
    Run every attempt of the schedule and keep the one with the fewest colors.
    The best only changes on a strictly smaller color count, so ties keep the
    earliest attempt.
    """
    cfg = cfg or TrialConfig()
    _validate(cfg)

    plan = _plan(cfg)
    n = graph.n_vertices

    best = ColoringResult.empty(n)
    best_n_colors = n + 1
    total_time = 0.0
    hist: List[int] = []

    def reduce(res: ColoringResult) -> None:
        nonlocal best, best_n_colors, total_time
        report = verify_coloring(graph, res.colors)
        assert report["feasible"], f"invalid coloring from {res.strategy!r}: {report}"

        total_time += res.elapsed
        if res.n_colors < best_n_colors:
            best_n_colors = res.n_colors
            best = res
        hist.append(best_n_colors)

    if cfg.workers == 1 or len(plan) < 2:
        for strategy, seed in plan:
            reduce(run_attempt(graph, strategy, seed))
    else:
        strategies = [s for s, _ in plan]
        seeds = [sd for _, sd in plan]
        chunk = max(1, len(plan) // (cfg.workers * 4))
        with ProcessPoolExecutor(max_workers=cfg.workers) as executor:
            for res in executor.map(run_attempt, [graph] * len(plan), strategies, seeds, chunksize=chunk):
                reduce(res)

    return TrialResult(
        best=best,
        best_n_colors=best_n_colors,
        total_time=total_time,
        attempts=len(plan),
        best_history=hist,
    )
