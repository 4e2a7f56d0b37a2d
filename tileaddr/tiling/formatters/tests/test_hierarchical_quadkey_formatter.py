import numpy as np
import pytest

from tileaddr.tiling import TileSourceConfig, Tile, InvalidConfiguration
from tileaddr.tiling.exceptions import CoordinateOutOfRange, SchemeConsistencyError, TileAddressWarning
from tileaddr.tiling.formatters import HierarchicalQuadkeyFormatter, unpack_tile_id


def make_config(formatter=None, template='/{Z}/{X}/{Y}.png'):
    if formatter is None:
        formatter = HierarchicalQuadkeyFormatter()
    return TileSourceConfig.builder('http://wvs.example.com/', template).formatter(formatter).build()


def test_quadkey_without_levels():
    config = make_config()
    assert config.format_path(Tile(1, 2, 3)) == '3/3298536980481.png'


def test_quadkey_levels_and_padding():
    config = make_config()
    formatter = config.formatter

    # 第二级分量为 (3, 12)，只有3需要补零
    tile = Tile(1 * 256 + 3 * 16 + 5, 12 * 16 + 2, 11)
    assert formatter.hierarchical_path(tile) == '0100/0312/'
    assert config.format_path(tile) == '11/0100/0312/12094831329589.png'


def test_quadkey_multiple_levels():
    config = make_config()

    # 3级目录，顶级分量不为0时下级分量仍需落在[0, 16)内
    assert config.format_path(Tile(4096, 0, 13)) == '13/0100/0000/0000/14293651165184.png'
    assert config.format_path(Tile(13503, 6208, 14)) == '14/0301/0408/1104/15399672362175.png'

    # 4级目录
    tile = Tile(2 ** 18 - 1, 12345, 18)
    assert config.formatter.hierarchical_path(tile) == '0300/1503/1500/1503/'
    assert config.format_path(tile) == '18/0300/1503/1500/1503/19804154232831.png'


@pytest.mark.parametrize('zoom', range(2, 21), indirect=False)
def test_quadkey_in_pyramid_tiles(zoom):
    config = make_config(template='{Z}/{X}/{Y}')
    rng = np.random.default_rng(zoom)
    n_tiles = 2 ** zoom

    columns = rng.integers(0, n_tiles, size=50).tolist() + [0, n_tiles - 1]
    rows = rng.integers(0, n_tiles, size=50).tolist() + [n_tiles - 1, 0]
    for column, row in zip(columns, rows):
        tile = Tile(column, row, zoom)
        path = config.format_path(tile)
        *prefix, tile_id = path.split('/')

        assert prefix[0] == str(zoom)
        assert len(prefix) - 1 == HierarchicalQuadkeyFormatter.count_levels(zoom)
        assert all(len(pair) == 4 and int(pair[:2]) < 16 and int(pair[2:]) < 16 for pair in prefix[1:])
        assert unpack_tile_id(int(tile_id)) == (column, row, zoom)


def test_quadkey_level_count():
    assert HierarchicalQuadkeyFormatter.count_levels(0) == 0
    assert HierarchicalQuadkeyFormatter.count_levels(3) == 0
    assert HierarchicalQuadkeyFormatter.count_levels(4) == 1
    assert HierarchicalQuadkeyFormatter.count_levels(7) == 1
    assert HierarchicalQuadkeyFormatter.count_levels(8) == 2
    assert HierarchicalQuadkeyFormatter.count_levels(18) == 4
    assert HierarchicalQuadkeyFormatter.count_levels(20) == 5


def test_quadkey_pad():
    assert HierarchicalQuadkeyFormatter.pad(0) == '00'
    assert HierarchicalQuadkeyFormatter.pad(9) == '09'
    assert HierarchicalQuadkeyFormatter.pad(10) == '10'
    assert HierarchicalQuadkeyFormatter.pad(15) == '15'


def test_quadkey_zoom_clamping():
    config = make_config(HierarchicalQuadkeyFormatter(zoom_floor=0, zoom_ceil=18))
    path = config.format_path(Tile(5, 9, 30))

    assert path.startswith('18/')
    assert path.count('/') == 1 + 4
    assert unpack_tile_id(int(path.split('/')[-1][:-len('.png')])) == (5, 9, 18)

    # 默认范围下低于最小等级的瓦片截断到2级
    assert make_config().format_path(Tile(0, 0, 0)).startswith('2/')


def test_quadkey_zoom_offset():
    formatter = HierarchicalQuadkeyFormatter(reference_depth=10, method_config=8)
    config = make_config(formatter)

    assert formatter.zoom_offset == 2
    assert config.format_path(Tile(0, 0, 3)) == '5/0000/5497558138880.png'


def test_quadkey_suffix():
    config = make_config(template='/{Z}/{X}/{Y}')
    assert config.format_path(Tile(1, 2, 3)) == '3/3298536980481'

    config = make_config(template='/{Z}/{X}/{Y}.jpg')
    assert config.format_path(Tile(1, 2, 3)).endswith('.jpg')


def test_quadkey_only_digits_and_slashes():
    config = make_config(template='{Z}/{X}/{Y}')
    for tile in [Tile(0, 0, 2), Tile(300, 700, 10), Tile(2 ** 18 - 1, 12345, 18), Tile(2 ** 20 - 1, 2 ** 20 - 1, 20)]:
        path = config.format_path(tile)
        assert set(path) <= set('0123456789/')
        assert path == config.format_path(tile)


def test_quadkey_invalid_zoom_bounds():
    with pytest.raises(InvalidConfiguration):
        HierarchicalQuadkeyFormatter(zoom_floor=10, zoom_ceil=5)


def test_quadkey_overflow():
    config = make_config(HierarchicalQuadkeyFormatter(strict=True))
    with pytest.raises(CoordinateOutOfRange):
        config.format_path(Tile(2 ** 20, 0, 20))

    config = make_config(HierarchicalQuadkeyFormatter(strict=False))
    with pytest.warns(TileAddressWarning):
        path = config.format_path(Tile(2 ** 20, 0, 20))
    tile_id = int(path.split('/')[-1][:-len('.png')])
    assert unpack_tile_id(tile_id) == (2 ** 20 - 1, 0, 20)


def test_quadkey_inconsistent_tile():
    config = make_config()

    # 4级瓦片的列号不可能达到1024
    with pytest.raises(SchemeConsistencyError):
        config.format_path(Tile(1024, 0, 4))
    with pytest.raises(AssertionError):
        config.format_path(Tile(0, 1024, 4))


def test_quadkey_equality():
    assert HierarchicalQuadkeyFormatter() == HierarchicalQuadkeyFormatter()
    assert hash(HierarchicalQuadkeyFormatter(zoom_ceil=18)) == hash(HierarchicalQuadkeyFormatter(zoom_ceil=18))
    assert HierarchicalQuadkeyFormatter(zoom_ceil=18) != HierarchicalQuadkeyFormatter()
