from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .errors import (
    OccupiedByBarrierError,
    OccupiedByVoidError,
    OutOfBoundsError,
    UnsolvableError,
)
from .grid import CELL_BARRIER, CELL_SPACE, CELL_VOID, NEIGHBORS_6, Coord, MazeGrid

logger = logging.getLogger(__name__)

UNLABELED = -1


@dataclass
class DistanceField:
    """BFS 距离场。

    distances 与网格同形，已访问格子为到起点的步数，未访问为 -1。
    BFS 在终点出现在前沿时立即停止，因此更远的格子保持 -1。
    """

    distances: np.ndarray  # int32
    start: Coord
    end: Coord

    def at(self, coord: Coord) -> int:
        return int(self.distances[coord])

    def labeled_coords(self) -> List[Coord]:
        return [
            (int(z), int(y), int(x))
            for z, y, x in np.argwhere(self.distances != UNLABELED)
        ]

    @property
    def max_distance(self) -> int:
        return int(self.distances.max())

    def clone(self) -> "DistanceField":
        return DistanceField(self.distances.copy(), self.start, self.end)


@dataclass
class SolveResult:
    """求解结果：起点到终点（含两端）的路径与距离场。"""

    path: List[Coord]
    distance_field: DistanceField
    visited: int


def _as_coord(raw: Sequence[int]) -> Coord:
    if len(raw) != 3:
        raise OutOfBoundsError(f"坐标 {list(raw)} 不是 ZYX 三元组", coord=None)
    try:
        # 只接受整数（含 numpy 整数），小数坐标不做截断
        return (operator.index(raw[0]), operator.index(raw[1]), operator.index(raw[2]))
    except TypeError as exc:
        raise OutOfBoundsError(f"坐标 {list(raw)} 包含非整数分量", coord=None) from exc


def _check_endpoints(grid: MazeGrid, start: Coord, end: Coord) -> None:
    for label, coord in (("起点", start), ("终点", end)):
        if not grid.in_bounds(*coord):
            raise OutOfBoundsError(
                f"{label}坐标 {list(coord)} 越界。所有坐标均为 ZYX 顺序。", coord=coord
            )
    for coord in (start, end):
        if grid.kind(*coord) == CELL_VOID:
            raise OccupiedByVoidError(f"坐标 {list(coord)} 位于 Void 上", coord=coord)
    for coord in (start, end):
        if grid.kind(*coord) == CELL_BARRIER:
            raise OccupiedByBarrierError(f"坐标 {list(coord)} 位于 Barrier 上", coord=coord)


def _flood(grid: MazeGrid, start: Coord, end: Coord) -> Tuple[np.ndarray, int]:
    """逐层 BFS，给可达的 Space 格子标上步数，终点进入前沿时停止。"""

    distances = np.full(grid.shape, UNLABELED, dtype=np.int32)
    passable = grid.cells == CELL_SPACE

    distances[start] = 0
    frontier: List[Coord] = [start]
    distance = 0
    visited = 1

    while distances[end] == UNLABELED:
        distance += 1
        next_frontier: List[Coord] = []
        for z, y, x in frontier:
            for dz, dy, dx in NEIGHBORS_6:
                nz, ny, nx = z + dz, y + dy, x + dx
                if not grid.in_bounds(nz, ny, nx):
                    continue
                if not passable[nz, ny, nx]:
                    continue
                if distances[nz, ny, nx] != UNLABELED:
                    continue
                distances[nz, ny, nx] = distance
                next_frontier.append((nz, ny, nx))

        if not next_frontier:
            raise UnsolvableError(
                f"从 {list(start)} 无法到达 {list(end)}：第 {distance} 层前沿为空"
            )
        visited += len(next_frontier)
        frontier = next_frontier

    return distances, visited


def _backtrace(distances: np.ndarray, start: Coord, end: Coord) -> List[Coord]:
    """从终点沿距离场下降回到起点，再反转为起点 -> 终点。

    每一步选择六邻域中距离严格最小的已标记格子，平局时按 NEIGHBORS_6 顺序取第一个。
    """

    D, H, W = distances.shape
    current = end
    path: List[Coord] = []
    while current != start:
        path.append(current)
        z, y, x = current
        lowest = None
        lowest_coord = None
        for dz, dy, dx in NEIGHBORS_6:
            nz, ny, nx = z + dz, y + dy, x + dx
            if not (0 <= nz < D and 0 <= ny < H and 0 <= nx < W):
                continue
            value = int(distances[nz, ny, nx])
            if value == UNLABELED:
                continue
            if lowest is None or value < lowest:
                lowest = value
                lowest_coord = (nz, ny, nx)
        current = lowest_coord
    path.append(start)
    path.reverse()
    return path


def solve(grid: MazeGrid, start: Sequence[int], end: Sequence[int]) -> SolveResult:
    """在 6 邻接的 Space 图上求 start 到 end 的最短路径。

    不修改传入的网格；失败时抛出 OutOfBoundsError / OccupiedByVoidError /
    OccupiedByBarrierError / UnsolvableError 之一。
    """

    start_c = _as_coord(start)
    end_c = _as_coord(end)
    _check_endpoints(grid, start_c, end_c)

    distances, visited = _flood(grid, start_c, end_c)
    path = _backtrace(distances, start_c, end_c)

    logger.debug(
        "solve %s -> %s: path length %d, visited %d",
        start_c,
        end_c,
        len(path),
        visited,
    )
    return SolveResult(
        path=path,
        distance_field=DistanceField(distances, start_c, end_c),
        visited=visited,
    )
