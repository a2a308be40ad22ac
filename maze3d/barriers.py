from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .config import MazeConfig
from .grid import CELL_BARRIER, CELL_SPACE, MazeGrid

logger = logging.getLogger(__name__)


def chance_hit(rng: np.random.Generator, chance: int) -> bool:
    """按概率参数判断是否放置障碍。

    - chance == 0：从不放置；
    - chance == 1：50/50；
    - chance == N > 1：1/N 的概率。
    """

    if chance == 0:
        return False
    if chance == 1:
        return bool(rng.random() < 0.5)
    return int(rng.integers(chance)) == 0


def _place_barriers(grid: MazeGrid, config: MazeConfig, rng: np.random.Generator) -> None:
    """第一遍：按 z -> y -> x 顺序原地扫描，对 Space 格子按规则尝试放置障碍。

    规则按顺序匹配，命中第一条即停止：
    1. 上下 (y±1) 均为阻挡 -> y_chance
    2. 左右 (x±1) 均为阻挡 -> x_chance
    3. 前后 (z±1) 均为阻挡 -> z_chance
    4. 位于奇数层，或偶数层的奇数行奇数列（对角孔洞）-> diag_chance

    读取邻居时会看到本轮扫描中已经改写过的格子。
    """

    D, H, W = grid.shape
    for z in range(D):
        for y in range(H):
            for x in range(W):
                if grid.cells[z, y, x] != CELL_SPACE:
                    continue

                if grid.is_blockade(z, y - 1, x) and grid.is_blockade(z, y + 1, x):
                    chance = config.y_chance
                elif grid.is_blockade(z, y, x + 1) and grid.is_blockade(z, y, x - 1):
                    chance = config.x_chance
                elif grid.is_blockade(z - 1, y, x) and grid.is_blockade(z + 1, y, x):
                    chance = config.z_chance
                elif z % 2 == 1 or (y % 2 == 1 and x % 2 == 1):
                    chance = config.diag_chance
                else:
                    continue

                if chance_hit(rng, chance):
                    grid.cells[z, y, x] = CELL_BARRIER


def remove_isolated_barriers(grid: MazeGrid) -> int:
    """第二遍：六邻域内没有任何 Barrier 的孤立 Barrier 退回为 Space。

    基于扫描前的快照判断，不会级联。Void 不算作相邻的 Barrier。
    返回被移除的障碍数量。
    """

    barrier = grid.cells == CELL_BARRIER
    padded = np.pad(barrier, 1, mode="constant", constant_values=False)

    has_neighbor = np.zeros_like(barrier)
    for axis in range(3):
        for shift in (-1, 1):
            has_neighbor |= np.roll(padded, shift, axis=axis)[1:-1, 1:-1, 1:-1]

    isolated = barrier & ~has_neighbor
    grid.cells[isolated] = CELL_SPACE
    return int(np.count_nonzero(isolated))


def randomize_barriers(
    template: MazeGrid,
    config: MazeConfig,
    rng: Optional[np.random.Generator] = None,
) -> MazeGrid:
    """从模板副本出发随机生成障碍，并清理孤立障碍。

    rng 为 None 时使用一个未固定种子的新生成器；
    传入固定种子的生成器时结果完全可复现。
    """

    if rng is None:
        rng = np.random.default_rng()

    grid = template.clone()
    before = grid.count(CELL_BARRIER)
    _place_barriers(grid, config, rng)
    placed = grid.count(CELL_BARRIER) - before
    removed = remove_isolated_barriers(grid)

    logger.debug(
        "randomize %s: placed %d barrier, removed %d isolated, total %d",
        grid.shape,
        placed,
        removed,
        grid.count(CELL_BARRIER),
    )
    return grid
