"""迷宫流水线的异常类型。

所有异常都继承自 MazeError，同时继承一个合适的内置异常，
方便调用方按 ValueError / IndexError 等常见类型捕获。
"""

from __future__ import annotations

from typing import Optional, Sequence


class MazeError(Exception):
    """迷宫相关异常的基类。"""


class ConfigurationError(MazeError, ValueError):
    """配置非法：符号重复、void 坐标格式错误或越界等。"""

    def __init__(self, message: str, symbol: Optional[str] = None) -> None:
        super().__init__(message)
        self.symbol = symbol


class _CoordError(MazeError):
    def __init__(self, message: str, coord: Optional[Sequence[int]] = None) -> None:
        super().__init__(message)
        self.coord = tuple(coord) if coord is not None else None


class OutOfBoundsError(_CoordError, IndexError):
    """起点或终点不在网格范围内。"""


class OccupiedByVoidError(_CoordError, ValueError):
    """起点或终点落在 Void 上。"""


class OccupiedByBarrierError(_CoordError, ValueError):
    """起点或终点落在 Barrier 上。"""


class UnsolvableError(MazeError, RuntimeError):
    """BFS 前沿耗尽仍未到达终点。"""


class EmptyPathError(MazeError, RuntimeError):
    """在成功求解之前请求描绘路径。"""


class GridNotReadyError(MazeError, ValueError):
    """请求的网格尚未生成。"""


__all__ = [
    "MazeError",
    "ConfigurationError",
    "OutOfBoundsError",
    "OccupiedByVoidError",
    "OccupiedByBarrierError",
    "UnsolvableError",
    "EmptyPathError",
    "GridNotReadyError",
]
