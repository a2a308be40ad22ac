from __future__ import annotations

import os
from typing import Dict, Iterable, List

import matplotlib.pyplot as plt
import numpy as np

from ..template import SCALE_DIMS

PRESET_ORDER = ["open", "sparse", "default", "dense"]
PRESET_LABELS = {"open": "无额外障碍", "sparse": "稀疏", "default": "默认", "dense": "密集"}


def _group_by(
    results: Iterable[dict], key: str
) -> Dict[str, List[dict]]:
    grouped: Dict[str, List[dict]] = {}
    for r in results:
        k = r[key]
        grouped.setdefault(k, []).append(r)
    return grouped


def _mean_metric(rows: List[dict], metric_key: str) -> float:
    vals = [r[metric_key] for r in rows if r[metric_key] is not None]
    if not vals:
        return np.nan
    return float(np.mean(vals))


def _plot_bar_by_preset(
    results: List[dict],
    metric_key: str,
    ylabel: str,
    title: str,
    filename: str,
    output_dir: str,
) -> None:
    """横轴为概率预设，每个尺度一组柱，取多个种子的平均值。"""

    by_scale = _group_by(results, "scale")
    scales = [s for s in SCALE_DIMS if s in by_scale]
    presets = [p for p in PRESET_ORDER if any(r["preset"] == p for r in results)]
    if not scales or not presets:
        return

    fig, ax = plt.subplots(figsize=(8, 5), dpi=150)

    x = np.arange(len(presets))
    width = 0.8 / len(scales)

    for i, scale in enumerate(scales):
        by_preset = _group_by(by_scale[scale], "preset")
        vals = [_mean_metric(by_preset.get(p, []), metric_key) for p in presets]
        offset = (i - (len(scales) - 1) / 2) * width
        ax.bar(x + offset, vals, width, label=scale)

    ax.set_xticks(x)
    ax.set_xticklabels([PRESET_LABELS.get(p, p) for p in presets])
    ax.set_ylabel(ylabel)
    ax.set_title(title)

    # 图例放在下方，避免遮挡图形
    ax.legend(loc="lower center", bbox_to_anchor=(0.5, -0.3), ncol=len(scales), frameon=False)
    fig.subplots_adjust(bottom=0.3, top=0.88)

    out_path = os.path.join(output_dir, filename)
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)


def plot_all_charts(results_dataclasses, output_dir: str) -> None:
    """从 ExperimentResult 列表生成所有图表。"""

    os.makedirs(output_dir, exist_ok=True)

    # dataclass -> dict
    results: List[dict] = [
        r if isinstance(r, dict) else r.__dict__ for r in results_dataclasses
    ]

    # 1) 障碍密度
    _plot_bar_by_preset(
        results,
        metric_key="barrier_density",
        ylabel="障碍占比",
        title="不同概率预设下的障碍密度",
        filename="barrier_density.png",
        output_dir=output_dir,
    )

    # 2) 最短路径长度
    _plot_bar_by_preset(
        results,
        metric_key="path_length",
        ylabel="路径步数",
        title="对角起终点之间的最短路径长度",
        filename="path_length.png",
        output_dir=output_dir,
    )

    # 3) 运行时间
    _plot_bar_by_preset(
        results,
        metric_key="runtime_ms",
        ylabel="运行时间 (ms)",
        title="生成 + 求解的运行时间",
        filename="runtime.png",
        output_dir=output_dir,
    )
