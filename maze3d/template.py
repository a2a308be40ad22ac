from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

import numpy as np

from .config import MazeConfig
from .errors import ConfigurationError
from .grid import CELL_BARRIER, CELL_SPACE, CELL_VOID, MazeGrid

logger = logging.getLogger(__name__)


# 三种尺度的统一尺寸设置 (depth, height, width)
SCALE_DIMS: Dict[str, Tuple[int, int, int]] = {
    "small": (5, 5, 5),
    "medium": (11, 11, 11),
    "large": (21, 21, 21),
}


def config_for_scale(scale: str, **overrides: Any) -> MazeConfig:
    """按尺度名构造配置，其余字段可通过关键字覆盖。"""

    if scale not in SCALE_DIMS:
        raise ConfigurationError(f"未知 scale: {scale}")
    depth, height, width = SCALE_DIMS[scale]
    return MazeConfig(depth=depth, height=height, width=width, **overrides)


def generate_template(config: MazeConfig) -> MazeGrid:
    """生成迷宫模板：三个方向上 barrier / space 交替的骨架。

    - 偶数层 z 的偶数行 y 上，偶数列 x 为 Barrier，奇数列为 Space；
    - 其余位置（奇数层、偶数层的奇数行）全部为 Space；
    - 即 (偶, 偶, 偶) 位置为柱子，其余为走廊；
    - 最后把 void 坐标覆盖为 Void，无论骨架原来放的是什么。

    没有任何随机性，相同配置得到完全相同的网格。
    """

    grid = MazeGrid.full(config.depth, config.height, config.width, CELL_SPACE)
    grid.cells[0::2, 0::2, 0::2] = CELL_BARRIER

    voids = config.in_bounds_void()
    if voids:
        idx = np.array(voids, dtype=np.intp)
        grid.cells[idx[:, 0], idx[:, 1], idx[:, 2]] = CELL_VOID

    logger.debug(
        "template %s: %d barrier, %d void",
        grid.shape,
        grid.count(CELL_BARRIER),
        grid.count(CELL_VOID),
    )
    return grid
