from __future__ import annotations

from ..constants import Viewport
from ..exceptions import InvalidConfiguration, SchemeConsistencyError
from ..tile import Tile
from .tile_address_formatter import TileAddressFormatter
from .tile_id import pack_tile_id, fit_bits, COLUMN_BITS, ROW_BITS, ZOOM_BITS


class HierarchicalQuadkeyFormatter(TileAddressFormatter):
    ReferenceDepth = 8
    MethodConfig = 8

    BitsPerLevel = 4
    MinLevelZoom = 3

    def __init__(self,
                 zoom_floor: int | None = None,
                 zoom_ceil: int | None = None,
                 reference_depth: int | None = None,
                 method_config: int | None = None,
                 strict: bool | None = None):
        """分级目录式瓦片地址，形如`<zoom>/<rrcc>/<rrcc>/.../<id><suffix>`

        Parameters
        ----------
        zoom_floor, zoom_ceil
            等级截断范围（闭区间），默认为Viewport的最小、最大等级
        reference_depth, method_config
            等级偏移量为 reference_depth - method_config，默认方案下为0
        strict
            坐标超出打包容量时是否直接报错，默认与 `__debug__` 一致，
            即常规运行时报错，`python -O` 下截断并给出警告

        Notes
        -----
        每一级目录由两个两位数组成，分别是列号和行号在该级4位分块中的序号，因此每级目录最多256个子项。
        末尾的数字标识将列号、行号和等级按20/20/8位打包，保证地址唯一。

        补零规则为单侧的：仅对不大于9的分量补零，由于每级分量必然小于16，因此结果始终为两位数。
        """
        if zoom_floor is None:
            zoom_floor = Viewport.MIN_ZOOM_LEVEL
        if zoom_ceil is None:
            zoom_ceil = Viewport.MAX_ZOOM_LEVEL
        if reference_depth is None:
            reference_depth = HierarchicalQuadkeyFormatter.ReferenceDepth
        if method_config is None:
            method_config = HierarchicalQuadkeyFormatter.MethodConfig
        if strict is None:
            strict = __debug__

        if zoom_floor > zoom_ceil:
            raise InvalidConfiguration('zoom_floor', f'{zoom_floor} is greater than zoom_ceil ({zoom_ceil}).')

        self.zoom_floor = zoom_floor
        self.zoom_ceil = zoom_ceil
        self.reference_depth = reference_depth
        self.method_config = method_config
        self.strict = strict

    @property
    def zoom_offset(self):
        return self.reference_depth - self.method_config

    def clamp_zoom(self, zoom):
        return min(max(zoom, self.zoom_floor), self.zoom_ceil)

    def adjusted_zoom(self, zoom):
        return self.clamp_zoom(zoom) + self.zoom_offset

    @staticmethod
    def count_levels(adjusted_zoom):
        """计算目录层级数，即 ceil((adjusted_zoom - 3) / 4)，不小于0
        """
        n = adjusted_zoom - HierarchicalQuadkeyFormatter.MinLevelZoom
        levels = -(-n // HierarchicalQuadkeyFormatter.BitsPerLevel)
        return max(levels, 0)

    @staticmethod
    def pad(value):
        if value > 9:
            return str(value)
        else:
            return '0' + str(value)

    def _fit(self, tile: Tile):
        column = fit_bits('column', tile.column, COLUMN_BITS, strict=self.strict)
        row = fit_bits('row', tile.row, ROW_BITS, strict=self.strict)
        zoom = fit_bits('zoom', self.adjusted_zoom(tile.zoom), ZOOM_BITS, strict=self.strict)

        return column, row, zoom

    @staticmethod
    def _hierarchical_path(column, row, adjusted_zoom):
        levels = HierarchicalQuadkeyFormatter.count_levels(adjusted_zoom)
        bits = HierarchicalQuadkeyFormatter.BitsPerLevel
        limit = 1 << bits

        path = []
        # 累计已被上级目录覆盖的偏移，每级分量即为该级4位分块中的序号
        offset_row, offset_col = 0, 0
        for i in range(levels):
            size = 1 << (bits * (levels - i))
            level_row = (column - offset_row) // size
            level_col = (row - offset_col) // size

            if not (0 <= level_row < limit and 0 <= level_col < limit):
                raise SchemeConsistencyError(
                    f'Level {i} of tile ({column}, {row}) at zoom {adjusted_zoom}'
                    f' yields ({level_row}, {level_col}), expected values within [0, {limit}).'
                    f' Tile coordinates probably do not belong to this zoom level.'
                )

            path.append(HierarchicalQuadkeyFormatter.pad(level_row)
                        + HierarchicalQuadkeyFormatter.pad(level_col)
                        + '/')
            offset_row += level_row * size
            offset_col += level_col * size

        return ''.join(path)

    def hierarchical_path(self, tile: Tile) -> str:
        """生成分级目录部分，例如`0312/0805/`，等级不足时为空串
        """
        return HierarchicalQuadkeyFormatter._hierarchical_path(*self._fit(tile))

    def packed_id(self, tile: Tile) -> int:
        return pack_tile_id(*self._fit(tile))

    def format(self, config, tile) -> str:
        column, row, zoom = self._fit(tile)
        path = HierarchicalQuadkeyFormatter._hierarchical_path(column, row, zoom)
        tile_id = pack_tile_id(column, row, zoom)

        return f'{zoom}/{path}{tile_id}{config.path_suffix}'

    def _key(self):
        return self.zoom_floor, self.zoom_ceil, self.reference_depth, self.method_config, self.strict

    def __repr__(self):
        return (f'{type(self).__name__}('
                f'zoom_floor={self.zoom_floor}, zoom_ceil={self.zoom_ceil},'
                f' reference_depth={self.reference_depth}, method_config={self.method_config},'
                f' strict={self.strict})')
