from __future__ import annotations

from typing import Sequence

import numpy as np

from .errors import EmptyPathError
from .grid import CELL_PATH, Coord, MazeGrid


def trace_path(grid: MazeGrid, path: Sequence[Coord]) -> MazeGrid:
    """返回网格副本，路径上的格子改为 Path，其余保持不变。"""

    if len(path) == 0:
        raise EmptyPathError("无法描绘路径：路径长度为 0")

    traced = grid.clone()
    idx = np.array(path, dtype=np.intp)
    traced.cells[idx[:, 0], idx[:, 1], idx[:, 2]] = CELL_PATH
    return traced
