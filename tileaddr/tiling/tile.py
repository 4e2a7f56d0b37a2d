from __future__ import annotations

import numbers
from typing import Callable, NamedTuple

from .constants import WebMercator
from .exceptions import CoordinateOutOfRange


class Tile(NamedTuple):
    """瓦片金字塔中的单个瓦片，在zoom等级下column和row的合法范围为[0, 2^zoom)
    """
    column: int
    row: int
    zoom: int

    @staticmethod
    def of(column, row, zoom) -> Tile:
        """构造瓦片并检查坐标是否为非负整数

        Raises
        ------
        CoordinateOutOfRange
            任一坐标为负数或不是整数
        """
        coords = {'column': column, 'row': row, 'zoom': zoom}
        for name, value in coords.items():
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
                raise CoordinateOutOfRange(name, value)

        return Tile(int(column), int(row), int(zoom))

    @property
    def in_pyramid(self):
        n_tiles = WebMercator.tiles_in_axis(self.zoom)
        return 0 <= self.column < n_tiles and 0 <= self.row < n_tiles

    def flipped(self) -> Tile:
        """返回以左下角为原点（TMS约定）计数行号的同一瓦片
        """
        column, row = WebMercator.warp_tile_coord(self.column, self.row, self.zoom, bottom_left_as_origin=True)
        return Tile(column, row, self.zoom)


def _identity(value, _tile):
    return value


def _flip_row(row, tile):
    return WebMercator.tiles_in_axis(tile.zoom) - row - 1


class TileProjection(NamedTuple):
    """瓦片坐标到地址坐标的映射钩子

    每个钩子的签名为 `hook(value, tile) -> int`，用于让特定数据源采用不同的编号约定（例如翻转行号），
    而无需改动路径模板的解析逻辑。
    """
    column: Callable[[int, Tile], int] = _identity
    row: Callable[[int, Tile], int] = _identity
    zoom: Callable[[int, Tile], int] = _identity

    @staticmethod
    def identity() -> TileProjection:
        return TileProjection()

    @staticmethod
    def bottom_left_origin() -> TileProjection:
        """以左下角为原点的行号约定（TMS）
        """
        return TileProjection(row=_flip_row)

    def apply(self, tile: Tile):
        return self.column(tile.column, tile), self.row(tile.row, tile), self.zoom(tile.zoom, tile)
