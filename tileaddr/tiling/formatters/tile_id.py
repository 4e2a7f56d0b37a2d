import warnings

from ..exceptions import CoordinateOutOfRange, TileAddressWarning

# 位宽属于寻址方案的一部分，修改会使此前生成的全部瓦片地址失效
COLUMN_BITS = 20
ROW_BITS = 20
ZOOM_BITS = 8

COLUMN_SHIFT = 0
ROW_SHIFT = COLUMN_BITS
ZOOM_SHIFT = COLUMN_BITS + ROW_BITS


def fit_bits(name, value, bits, strict=True):
    """检查value能否以bits位无损存储

    Parameters
    ----------
    name
        分量名，用于报错信息
    value
        待检查的非负整数
    bits
        可用位数
    strict
        为True时超出范围直接抛出异常，否则截断到最大可表示值并给出警告

    Returns
    -------
    value
        可以无损存储的值
    """
    limit = 1 << bits
    if value < limit:
        return value

    if strict:
        raise CoordinateOutOfRange(name, value, limit)

    warnings.warn(f'Tile `{name}` ({value}) exceeds packing capacity (< {limit}),'
                  f' clamped to {limit - 1}.',
                  TileAddressWarning)
    return limit - 1


def pack_tile_id(column: int, row: int, zoom: int, strict=True) -> int:
    """将列号、行号、等级按20/20/8位拼接为一个整数

    全程使用Python整数运算，不会因浮点舍入丢失精度。
    """
    column = fit_bits('column', column, COLUMN_BITS, strict=strict)
    row = fit_bits('row', row, ROW_BITS, strict=strict)
    zoom = fit_bits('zoom', zoom, ZOOM_BITS, strict=strict)

    return (
        ((column & ((1 << COLUMN_BITS) - 1)) << COLUMN_SHIFT)
        + ((row & ((1 << ROW_BITS) - 1)) << ROW_SHIFT)
        + ((zoom & ((1 << ZOOM_BITS) - 1)) << ZOOM_SHIFT)
    )


def unpack_tile_id(tile_id: int):
    """`pack_tile_id`的逆运算

    Returns
    -------
    column, row, zoom
        编码前的瓦片坐标
    """
    tile_id = int(tile_id)
    column = (tile_id >> COLUMN_SHIFT) & ((1 << COLUMN_BITS) - 1)
    row = (tile_id >> ROW_SHIFT) & ((1 << ROW_BITS) - 1)
    zoom = (tile_id >> ZOOM_SHIFT) & ((1 << ZOOM_BITS) - 1)

    return column, row, zoom
