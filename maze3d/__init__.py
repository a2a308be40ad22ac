"""三维格点迷宫的生成与求解。

子模块：
- grid: 三维网格与格子类型
- config: 迷宫配置与校验
- template: barrier / space 交替的模板骨架
- barriers: 按概率随机放置障碍并清理孤立障碍
- solver: BFS 距离场与最短路径回溯
- trace: 在网格上描绘路径
- details: 各类格子的坐标列表
- render: 符号矩阵与文本输出
- maze: Maze3D 流水线对象
- eval: 批量实验与制图
"""

from .config import MazeConfig
from .errors import (
    ConfigurationError,
    EmptyPathError,
    GridNotReadyError,
    MazeError,
    OccupiedByBarrierError,
    OccupiedByVoidError,
    OutOfBoundsError,
    UnsolvableError,
)
from .grid import CELL_BARRIER, CELL_PATH, CELL_SPACE, CELL_VOID, MazeGrid
from .maze import Maze3D

__all__ = [
    "Maze3D",
    "MazeConfig",
    "MazeGrid",
    "CELL_SPACE",
    "CELL_BARRIER",
    "CELL_VOID",
    "CELL_PATH",
    "MazeError",
    "ConfigurationError",
    "OutOfBoundsError",
    "OccupiedByVoidError",
    "OccupiedByBarrierError",
    "UnsolvableError",
    "EmptyPathError",
    "GridNotReadyError",
]
