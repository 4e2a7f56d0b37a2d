from functools import lru_cache

import numpy as np
from pyproj import CRS, Transformer


class Viewport:
    """瓦片金字塔的全局缩放等级范围，在未显式指定时作为数据源和格式化器的默认等级边界
    """
    MIN_ZOOM_LEVEL = 2
    MAX_ZOOM_LEVEL = 20


class WebMercator:
    """适用于四叉树组织的WebMercator瓦片坐标相关计算
    """
    WGS84 = CRS.from_string('WGS 84')
    PseudoMercator = CRS.from_string('WGS 84 / Pseudo-Mercator')

    Perimeter = 2 * np.pi * PseudoMercator.ellipsoid.semi_major_metre
    WGS84_PseudoMercator = Transformer.from_crs(WGS84, PseudoMercator, always_xy=True)

    @staticmethod
    def wgs84_to_pseudo_mercator(long, lat):
        """从WGS84转换为Pseudo-Mercator坐标系
        """
        x, y = WebMercator.WGS84_PseudoMercator.transform(long, lat)

        return x, y

    @staticmethod
    @lru_cache
    def tiles_in_axis(level):
        """计算在level等级下单一方向上的tile数

        Parameters
        ----------
        level
            tile等级

        Returns
        -------
        ret
            在level等级下单一方向上最大tile数
        """
        return 2 ** level

    @staticmethod
    def tile_width(level):
        return WebMercator.Perimeter / WebMercator.tiles_in_axis(level)

    @staticmethod
    def wgs84_bounds_to_tile(bounds, level):
        """将WGS 84经纬度边界转换为左上原点约定下的Tile序号边界

        Parameters
        ----------
        bounds
            WGS 84坐标边界，以[lon_min, lon_max, lat_min, lat_max]顺序提供
        level
            缩放等级

        Returns
        -------
        tile_bounds
            Tile序号边界，以[col_min, col_max, row_min, row_max]顺序给出，均为闭区间

        Notes
        -----
        由于原点方向不一致，转换后y方向上下边界会交换，即row_min对应lat_max。
        超出瓦片金字塔范围的部分会被截断到合法序号内。
        """
        bounds = np.asarray(bounds, dtype=float)
        xs, ys = WebMercator.wgs84_to_pseudo_mercator(bounds[0:2], bounds[2:4])
        mercator_bounds = np.concatenate([xs, ys])

        tile_width = WebMercator.tile_width(level)
        n_tiles = WebMercator.tiles_in_axis(level)

        ret = np.floor((mercator_bounds + WebMercator.Perimeter / 2) / tile_width).astype(np.int64)
        ret = np.clip(ret, 0, n_tiles - 1)
        ret[2], ret[3] = n_tiles - ret[3] - 1, n_tiles - ret[2] - 1

        return ret

    @staticmethod
    def iter_tiles(bounds, level):
        """遍历覆盖给定WGS 84边界的全部瓦片

        Parameters
        ----------
        bounds
            WGS 84坐标边界，以[lon_min, lon_max, lat_min, lat_max]顺序提供
        level
            缩放等级

        Returns
        -------
        tiles
            左上原点约定下的(col, row)序列
        """
        tile_bounds = WebMercator.wgs84_bounds_to_tile(bounds, level)

        for x in range(tile_bounds[0], tile_bounds[1] + 1):
            for y in range(tile_bounds[2], tile_bounds[3] + 1):
                yield x, y

    @staticmethod
    def warp_tile_coord(x, y, z, bottom_left_as_origin=False):
        """WMTS规定北纬85.05°为零点，该函数用于根据给定参数，转换为对应的南纬85.05°为零点或不转换

        Parameters
        ----------
        x,y
            左上原点标准下x、y方向tile坐标
        z
            tile等级
        bottom_left_as_origin
            是否采用左下角作为tile原点

        Returns
        -------
        tile_coord
            给定约定下的tile坐标
        """
        if bottom_left_as_origin:
            y = WebMercator.tiles_in_axis(z) - y - 1
        return x, y
