from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

import numpy as np

from .barriers import randomize_barriers
from .config import MazeConfig
from .details import InstanceDetails, instance_details
from .errors import GridNotReadyError
from .grid import Coord, MazeGrid
from .render import render_layers
from .solver import DistanceField, solve
from .template import generate_template
from .trace import trace_path

logger = logging.getLogger(__name__)


class Maze3D:
    """三维迷宫流水线：模板 -> 随机障碍 -> 求解 -> 描绘路径。

    每个实例独占自己的全部网格，访问器返回的都是副本。
    任何一步重新生成障碍网格时，已有的路径、距离场和描绘结果都会被清空。

    用法::

        maze = Maze3D(width=11, height=11, depth=11, seed=0)
        maze.generate_template()
        maze.randomize_barriers()
        path = maze.solve((1, 1, 1), (9, 9, 9))
        traced = maze.trace_path()
    """

    def __init__(
        self,
        config: Optional[MazeConfig] = None,
        seed: Optional[int] = None,
        **fields: Any,
    ) -> None:
        if config is None:
            config = MazeConfig.from_dict(fields)
        elif fields:
            raise TypeError("config 与关键字字段不能同时给出")
        self._config = config
        self._rng = np.random.default_rng(seed)

        self._template: Optional[MazeGrid] = None
        self._barrier_grid: Optional[MazeGrid] = None
        self._traced_grid: Optional[MazeGrid] = None
        self._distance_field: Optional[DistanceField] = None
        self._path: List[Coord] = []

    # ------------------------------------------------------------------
    # 流水线各阶段
    # ------------------------------------------------------------------
    def _clear_solution(self) -> None:
        self._path = []
        self._distance_field = None
        self._traced_grid = None

    def generate_template(self) -> MazeGrid:
        """重建模板，障碍网格重置为模板副本。"""

        self._clear_solution()
        self._template = generate_template(self._config)
        self._barrier_grid = self._template.clone()
        return self._template.clone()

    def randomize_barriers(self, seed: Optional[int] = None) -> MazeGrid:
        """从模板重新随机生成障碍。给定 seed 时使用该种子的新生成器。"""

        if self._template is None:
            self.generate_template()
        self._clear_solution()
        rng = np.random.default_rng(seed) if seed is not None else self._rng
        self._barrier_grid = randomize_barriers(self._template, self._config, rng)
        return self._barrier_grid.clone()

    def solve(self, start: Sequence[int], end: Sequence[int]) -> List[Coord]:
        """求 start 到 end 的最短路径（ZYX 坐标，含两端）。"""

        self._clear_solution()
        if self._barrier_grid is None:
            self.generate_template()
        result = solve(self._barrier_grid, start, end)
        self._path = result.path
        self._distance_field = result.distance_field
        return list(self._path)

    def trace_path(self) -> MazeGrid:
        """在障碍网格副本上用 Path 标出路径。"""

        if self._barrier_grid is None:
            self.generate_template()
        self._traced_grid = trace_path(self._barrier_grid, self._path)
        return self._traced_grid.clone()

    # ------------------------------------------------------------------
    # 访问器
    # ------------------------------------------------------------------
    @property
    def config(self) -> MazeConfig:
        return self._config

    @property
    def template(self) -> Optional[MazeGrid]:
        return self._template.clone() if self._template is not None else None

    @property
    def barrier_grid(self) -> Optional[MazeGrid]:
        return self._barrier_grid.clone() if self._barrier_grid is not None else None

    @property
    def traced_grid(self) -> Optional[MazeGrid]:
        return self._traced_grid.clone() if self._traced_grid is not None else None

    @property
    def mapped_number_maze(self) -> Optional[DistanceField]:
        """最近一次成功求解的距离场。"""

        return self._distance_field.clone() if self._distance_field is not None else None

    @property
    def path(self) -> List[Coord]:
        return list(self._path)

    @property
    def void_coords(self) -> List[Coord]:
        return self._config.in_bounds_void()

    def instance_details(self) -> InstanceDetails:
        if self._barrier_grid is None:
            self.generate_template()
        return instance_details(
            self._barrier_grid,
            path=self._path,
            distance_field=self._distance_field,
            void_coords=self.void_coords,
        )

    def render(self, traced: bool = False) -> str:
        grid = self._traced_grid if traced else self._barrier_grid
        if grid is None:
            raise GridNotReadyError("尚无可输出的网格" + ("（请先调用 trace_path）" if traced else ""))
        return render_layers(grid, self._config)
