from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .grid import CELL_BARRIER, CELL_SPACE, Coord, MazeGrid
from .solver import DistanceField


@dataclass
class InstanceDetails:
    """各类格子的坐标列表，供外部可视化按类型批量摆放实例。

    attrs
    ------
    barrier / space：从障碍网格按 z -> y -> x 顺序扫描得到；
    void：配置中的 void 坐标（已过滤越界项）；
    path：求解得到的有序路径；
    map：距离场中被 BFS 标记过的格子。
    """

    barrier: List[Coord] = field(default_factory=list)
    space: List[Coord] = field(default_factory=list)
    void: List[Coord] = field(default_factory=list)
    path: List[Coord] = field(default_factory=list)
    map: List[Coord] = field(default_factory=list)

    @property
    def barrier_count(self) -> int:
        return len(self.barrier)

    @property
    def space_count(self) -> int:
        return len(self.space)

    @property
    def void_count(self) -> int:
        return len(self.void)

    @property
    def path_count(self) -> int:
        return len(self.path)

    @property
    def map_count(self) -> int:
        return len(self.map)


def instance_details(
    barrier_grid: MazeGrid,
    path: Sequence[Coord] = (),
    distance_field: Optional[DistanceField] = None,
    void_coords: Sequence[Coord] = (),
) -> InstanceDetails:
    return InstanceDetails(
        barrier=barrier_grid.coords_of(CELL_BARRIER),
        space=barrier_grid.coords_of(CELL_SPACE),
        void=list(void_coords),
        path=list(path),
        map=distance_field.labeled_coords() if distance_field is not None else [],
    )
