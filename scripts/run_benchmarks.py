#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from tictactoe_ai.game_state import GameState
from tictactoe_ai.search import Searcher
from tictactoe_ai.tracking import log_metrics, log_params, maybe_mlflow_run


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 10
    depth: int = 9
    tracking: str = "none"  # or "mlflow"
    log_dir: Path = Path("runs")


def time_search(pruning: bool, depth: int) -> Tuple[float, int]:
    searcher = Searcher(GameState(), pruning=pruning)
    t0 = time.perf_counter()
    searcher.search(depth)
    return time.perf_counter() - t0, searcher.nodes


def main() -> int:
    ap = argparse.ArgumentParser(description="Time a full search from the empty board")
    ap.add_argument("--repeats", type=int, default=Config.repeats)
    ap.add_argument("--depth", type=int, default=Config.depth)
    ap.add_argument("--tracking", choices=["none", "mlflow"], default=Config.tracking)
    ap.add_argument("--log-dir", type=Path, default=Config.log_dir)
    ns = ap.parse_args()
    cfg = Config(repeats=ns.repeats, depth=ns.depth, tracking=ns.tracking, log_dir=ns.log_dir)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    with maybe_mlflow_run(cfg.tracking == "mlflow", run_name="search_benchmarks", log_dir=cfg.log_dir):
        log_params({"repeats": cfg.repeats, "depth": cfg.depth})
        metrics = {}
        for label, pruning in (("alphabeta", True), ("fullwidth", False)):
            times: List[float] = []
            nodes = 0
            for _ in range(cfg.repeats):
                dt, nodes = time_search(pruning, cfg.depth)
                times.append(dt)
            m, h = ci95(times)
            metrics[f"{label}_mean_s"] = m
            metrics[f"{label}_ci95_half_s"] = h
            metrics[f"{label}_nodes"] = float(nodes)
            logging.info("%s: mean=%.4fs ± %.4fs (95%% CI) nodes=%d", label, m, h, nodes)
        log_metrics(metrics)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
