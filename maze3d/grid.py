from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

# 格子类型：Space / Barrier / Void / Path
CELL_SPACE = 0
CELL_BARRIER = 1
CELL_VOID = 2
CELL_PATH = 3

CELL_KINDS: Tuple[int, ...] = (CELL_SPACE, CELL_BARRIER, CELL_VOID, CELL_PATH)

Coord = Tuple[int, int, int]  # (z, y, x)

# 六邻接方向 (dz, dy, dx)，顺序固定：下、上、右、左、前、后
NEIGHBORS_6: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
    (1, 0, 0),
    (-1, 0, 0),
)


@dataclass
class MazeGrid:
    """三维迷宫网格。

    使用 shape = (D, H, W)，分别对应 z, y, x 方向尺寸。
    cells[z, y, x] 存放 CELL_* 中的一种格子类型。
    """

    cells: np.ndarray  # int8 类型

    def __post_init__(self) -> None:
        if self.cells.ndim != 3:
            raise ValueError("cells 数组必须是三维的 (D, H, W)")
        if self.cells.dtype != np.int8:
            self.cells = self.cells.astype(np.int8)

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self.cells.shape  # (D, H, W)

    @property
    def depth(self) -> int:
        return self.cells.shape[0]

    @property
    def height(self) -> int:
        return self.cells.shape[1]

    @property
    def width(self) -> int:
        return self.cells.shape[2]

    def in_bounds(self, z: int, y: int, x: int) -> bool:
        return 0 <= z < self.depth and 0 <= y < self.height and 0 <= x < self.width

    def kind(self, z: int, y: int, x: int) -> int:
        return int(self.cells[z, y, x])

    def is_blockade(self, z: int, y: int, x: int) -> bool:
        """Barrier 或 Void 视为阻挡；越界位置不算阻挡。"""

        if not self.in_bounds(z, y, x):
            return False
        return self.kind(z, y, x) in (CELL_BARRIER, CELL_VOID)

    def coords_of(self, kind: int) -> List[Coord]:
        """按 z -> y -> x 扫描顺序返回某类格子的全部坐标。"""

        return [
            (int(z), int(y), int(x)) for z, y, x in np.argwhere(self.cells == kind)
        ]

    def count(self, kind: int) -> int:
        return int(np.count_nonzero(self.cells == kind))

    @classmethod
    def full(cls, depth: int, height: int, width: int, kind: int = CELL_SPACE) -> "MazeGrid":
        """构造一个全部为同一类型的网格。"""

        cells = np.full((depth, height, width), kind, dtype=np.int8)
        return cls(cells=cells)

    def clone(self) -> "MazeGrid":
        return MazeGrid(self.cells.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.cells, other.cells))
