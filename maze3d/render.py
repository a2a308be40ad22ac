"""文本输出：把网格转换为配置中的符号。"""

from __future__ import annotations

from typing import List

from .config import MazeConfig
from .grid import MazeGrid


def to_symbol_matrix(grid: MazeGrid, config: MazeConfig) -> List[List[List[str]]]:
    """返回 [z][y][x] 嵌套列表形式的符号矩阵。"""

    symbols = config.symbols()
    return [
        [[symbols[int(v)] for v in row] for row in layer]
        for layer in grid.cells
    ]


def render_layer(grid: MazeGrid, z: int, config: MazeConfig) -> str:
    """调试用：输出第 z 层，每行一个 y。"""

    if not 0 <= z < grid.depth:
        raise IndexError(f"层号 {z} 超出范围 [0, {grid.depth})")
    symbols = config.symbols()
    rows = ["".join(symbols[int(v)] for v in row) for row in grid.cells[z]]
    return "\n".join(rows)


def render_layers(grid: MazeGrid, config: MazeConfig) -> str:
    blocks = []
    for z in range(grid.depth):
        blocks.append(f"z={z}\n" + render_layer(grid, z, config))
    return "\n\n".join(blocks)
