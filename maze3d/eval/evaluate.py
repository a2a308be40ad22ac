from __future__ import annotations

import argparse
import csv
import json
import logging
import os
from dataclasses import asdict, dataclass
from time import perf_counter
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..barriers import randomize_barriers
from ..errors import UnsolvableError
from ..grid import CELL_BARRIER, CELL_SPACE, MazeGrid
from ..solver import solve
from ..template import SCALE_DIMS, config_for_scale, generate_template
from .charts import plot_all_charts

logger = logging.getLogger(__name__)


# 四档概率预设：x / y / z / diag 使用同一个 chance
CHANCE_PRESETS: Dict[str, int] = {
    "dense": 1,
    "default": 3,
    "sparse": 6,
    "open": 0,
}


@dataclass
class ExperimentResult:
    """单次实验（尺度 × 概率预设 × 种子）的指标记录。"""

    scale: str
    preset: str
    seed: int

    barrier_count: int
    barrier_density: float
    solvable: bool

    path_length: int | None
    manhattan_distance: int
    detour_ratio: float | None  # (路径步数) / 曼哈顿距离

    visited_cells: int
    runtime_ms: float


def _ensure_output_dirs(base_dir: str) -> None:
    os.makedirs(base_dir, exist_ok=True)
    os.makedirs(os.path.join(base_dir, "charts"), exist_ok=True)


def _corner_endpoints(grid: MazeGrid) -> tuple | None:
    """取扫描顺序上第一个和最后一个 Space 格子作为起点和终点。"""

    spaces = grid.coords_of(CELL_SPACE)
    if len(spaces) < 2:
        return None
    return spaces[0], spaces[-1]


def run_case(scale: str, preset: str, seed: int) -> ExperimentResult | None:
    chance = CHANCE_PRESETS[preset]
    config = config_for_scale(
        scale,
        x_chance=chance,
        y_chance=chance,
        z_chance=chance,
        diag_chance=chance,
    )

    start_time = perf_counter()
    template = generate_template(config)
    grid = randomize_barriers(template, config, np.random.default_rng(seed))

    endpoints = _corner_endpoints(grid)
    if endpoints is None:
        logger.warning("%s/%s seed=%d: Space 格子不足，跳过", scale, preset, seed)
        return None
    start, end = endpoints
    manhattan = sum(abs(a - b) for a, b in zip(start, end))

    path_length: int | None = None
    visited = 0
    solvable = True
    try:
        result = solve(grid, start, end)
        path_length = len(result.path) - 1
        visited = result.visited
    except UnsolvableError:
        solvable = False
        logger.info("%s/%s seed=%d: 无解", scale, preset, seed)
    runtime_ms = (perf_counter() - start_time) * 1000.0

    barrier_count = grid.count(CELL_BARRIER)
    detour = None
    if path_length is not None and manhattan > 0:
        detour = path_length / manhattan

    return ExperimentResult(
        scale=scale,
        preset=preset,
        seed=seed,
        barrier_count=barrier_count,
        barrier_density=barrier_count / grid.cells.size,
        solvable=solvable,
        path_length=path_length,
        manhattan_distance=manhattan,
        detour_ratio=detour,
        visited_cells=visited,
        runtime_ms=runtime_ms,
    )


def run_all_experiments(
    output_dir: str = "output",
    seeds_per_case: int = 5,
    base_seed: int = 42,
    scales: Optional[Sequence[str]] = None,
    presets: Optional[Sequence[str]] = None,
) -> List[ExperimentResult]:
    _ensure_output_dirs(output_dir)

    scales = list(scales) if scales is not None else list(SCALE_DIMS)
    presets = list(presets) if presets is not None else list(CHANCE_PRESETS)

    results: List[ExperimentResult] = []

    for scale_idx, scale in enumerate(scales):
        for preset_idx, preset in enumerate(presets):
            logger.info("运行 scale=%s preset=%s", scale, preset)
            for k in range(seeds_per_case):
                # 固定随机种子，保证可复现
                seed = base_seed + scale_idx * 1000 + preset_idx * 100 + k
                res = run_case(scale, preset, seed)
                if res is not None:
                    results.append(res)

    # 写出 CSV 与 JSON 摘要
    csv_path = os.path.join(output_dir, "results_table.csv")
    json_path = os.path.join(output_dir, "summary.json")

    fieldnames = [
        "scale",
        "preset",
        "seed",
        "barrier_count",
        "barrier_density",
        "solvable",
        "path_length",
        "manhattan_distance",
        "detour_ratio",
        "visited_cells",
        "runtime_ms",
    ]

    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in results:
            writer.writerow(asdict(r))

    with open(json_path, "w", encoding="utf-8") as f:
        json.dump([asdict(r) for r in results], f, ensure_ascii=False, indent=2)

    # 生成图表
    charts_dir = os.path.join(output_dir, "charts")
    plot_all_charts(results, charts_dir)

    logger.info("共 %d 条结果，已写入 %s", len(results), output_dir)
    return results


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="批量生成并求解三维迷宫，输出统计表与图表")
    parser.add_argument("--output-dir", default="output", help="输出目录")
    parser.add_argument("--seeds", type=int, default=5, help="每个组合运行的种子数")
    parser.add_argument("--base-seed", type=int, default=42, help="起始随机种子")
    parser.add_argument("--log-level", default="INFO", help="日志级别")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    run_all_experiments(
        output_dir=args.output_dir,
        seeds_per_case=args.seeds,
        base_seed=args.base_seed,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
