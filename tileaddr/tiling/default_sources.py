"""常用瓦片服务器的预设配置

使用前请自行阅读并遵守各服务商的使用条款。每个预设返回一个新的Builder，可继续修改后再调用`build()`。
"""
from .formatters import HierarchicalQuadkeyFormatter
from .tile_source_config import TileSourceConfig

DefaultBitmapTemplate = '/{Z}/{X}/{Y}.png'


def bitmap_source(url, template=DefaultBitmapTemplate, zoom_min=None, zoom_max=None) -> TileSourceConfig.Builder:
    return TileSourceConfig.builder(url, template, zoom_min, zoom_max)


def openstreetmap():
    return bitmap_source('https://tile.openstreetmap.org', zoom_max=18)


def stamen_toner():
    return bitmap_source('https://stamen-tiles.a.ssl.fastly.net/toner', zoom_max=18)


def stamen_watercolor():
    return bitmap_source('https://stamen-tiles.a.ssl.fastly.net/watercolor', '/{Z}/{X}/{Y}.jpg', zoom_max=18)


def ne_landcover():
    return bitmap_source('http://opensciencemap.org/tiles/ne', zoom_max=8)


def hikebike():
    return bitmap_source('https://tiles.wmflabs.org/hikebike', zoom_max=17)


def hikebike_hillshade():
    return bitmap_source('https://tiles.wmflabs.org/hillshading', zoom_max=14)


def mapilion_hillshade_v1(api_key=None):
    # 需要API key
    return bitmap_source('https://tiles.mapilion.com/hillshades/v1', zoom_min=1, zoom_max=12).credential(api_key)


def mapilion_hillshade_v2(api_key=None):
    # 需要API key
    return bitmap_source('https://tiles.mapilion.com/hillshades/v2', zoom_max=12).credential(api_key)


def _siweidg(url, template, map_type):
    return (bitmap_source(url, template, zoom_max=18)
            .formatter(HierarchicalQuadkeyFormatter())
            .map_type(map_type))


def siweidg_vect():
    return _siweidg('http://wvs.spaceview.com/', '/{Z}/{X}/{Y}.png', 'vect')


def siweidg_image():
    return _siweidg('http://wis.spaceview.com/', '/{Z}/{X}/{Y}.jpg', 'image')


def siweidg_tran():
    return _siweidg('http://wts.spaceview.com/', '/{Z}/{X}/{Y}.png', 'tran')
