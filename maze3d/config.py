from __future__ import annotations

import operator
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Tuple

from .errors import ConfigurationError
from .grid import CELL_BARRIER, CELL_PATH, CELL_SPACE, CELL_VOID, Coord

# 兼容原有的 camelCase 配置键
_CAMEL_KEYS: Dict[str, str] = {
    "xChance": "x_chance",
    "yChance": "y_chance",
    "zChance": "z_chance",
    "diagChance": "diag_chance",
    "voidSpace": "void_space",
    "barrierChar": "barrier_char",
    "spaceChar": "space_char",
    "pathChar": "path_char",
    "voidChar": "void_char",
    "sliceOffVoid": "slice_off_void",
}


@dataclass(frozen=True)
class MazeConfig:
    """迷宫配置。

    - width / height / depth：x, y, z 三个方向的尺寸，均需 >= 1；
    - x_chance / y_chance / z_chance / diag_chance：放置障碍的概率参数，
      0 表示从不放置，1 表示 50/50，N > 1 表示 1/N；
    - void_space：(z, y, x) 坐标列表，这些格子在模板中被挖空为 Void；
    - 四个符号用于文本输出，必须两两不同；
    - slice_off_void：为 True 时越界的 void 坐标被忽略，否则报错。
    """

    width: int = 11
    height: int = 11
    depth: int = 11
    x_chance: int = 3
    y_chance: int = 3
    z_chance: int = 3
    diag_chance: int = 3
    void_space: Tuple[Coord, ...] = field(default_factory=tuple)
    barrier_char: str = "X"
    space_char: str = " "
    path_char: str = "O"
    void_char: str = "#"
    slice_off_void: bool = False

    def __post_init__(self) -> None:
        self._check_symbols()
        self._check_numbers()
        object.__setattr__(self, "void_space", self._normalize_void(self.void_space))

    def _check_symbols(self) -> None:
        symbols = [self.barrier_char, self.space_char, self.path_char, self.void_char]
        seen = set()
        for sym in symbols:
            if sym in seen:
                raise ConfigurationError(
                    f"符号 {sym!r} 在多个属性中重复出现: {symbols!r}",
                    symbol=sym,
                )
            seen.add(sym)

    def _check_numbers(self) -> None:
        for name in ("width", "height", "depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} 必须是 >= 1 的整数，实际为 {value!r}")
        for name in ("x_chance", "y_chance", "z_chance", "diag_chance"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(f"{name} 必须是 >= 0 的整数，实际为 {value!r}")

    def _normalize_void(self, raw: Any) -> Tuple[Coord, ...]:
        coords: List[Coord] = []
        for i, coord in enumerate(raw):
            if isinstance(coord, (str, bytes)) or not hasattr(coord, "__len__") or len(coord) != 3:
                raise ConfigurationError(
                    f"void_space 第 {i} 项 {coord!r} 不是长度为 3 的 (z, y, x) 坐标"
                )
            if any(isinstance(v, bool) for v in coord):
                raise ConfigurationError(f"void_space 第 {i} 项 {coord!r} 包含非整数")
            try:
                c = (operator.index(coord[0]), operator.index(coord[1]), operator.index(coord[2]))
            except TypeError as exc:
                raise ConfigurationError(f"void_space 第 {i} 项 {coord!r} 包含非整数") from exc
            if not self.in_bounds(c) and not self.slice_off_void:
                raise ConfigurationError(
                    f"void 坐标 {list(c)} 越界。所有坐标均为 ZYX 顺序；"
                    "设置 slice_off_void=True 可忽略越界坐标。"
                )
            coords.append(c)
        return tuple(coords)

    @property
    def shape(self) -> Tuple[int, int, int]:
        return (self.depth, self.height, self.width)

    def in_bounds(self, coord: Coord) -> bool:
        z, y, x = coord
        return 0 <= z < self.depth and 0 <= y < self.height and 0 <= x < self.width

    def in_bounds_void(self) -> List[Coord]:
        """过滤掉越界坐标后的 void 列表。"""

        return [c for c in self.void_space if self.in_bounds(c)]

    def symbols(self) -> Dict[int, str]:
        return {
            CELL_BARRIER: self.barrier_char,
            CELL_SPACE: self.space_char,
            CELL_PATH: self.path_char,
            CELL_VOID: self.void_char,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "MazeConfig":
        """从原始字段构造配置，未给出的字段使用默认值。"""

        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in raw.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in known:
                raise ConfigurationError(f"未知配置项: {key}")
            kwargs[name] = value
        return cls(**kwargs)
