import pytest

from tileaddr.tiling import InvalidConfiguration, Tile, TileSourceConfig
from tileaddr.tiling.formatters import (
    resolve_formatter,
    TemplateFormatter,
    HierarchicalQuadkeyFormatter,
    CallableFormatter,
)


def test_resolve_named():
    assert isinstance(resolve_formatter(), TemplateFormatter)
    assert isinstance(resolve_formatter('template'), TemplateFormatter)
    assert isinstance(resolve_formatter('quadkey'), HierarchicalQuadkeyFormatter)
    assert isinstance(resolve_formatter('Hierarchical_Quadkey'), HierarchicalQuadkeyFormatter)
    assert isinstance(resolve_formatter(HierarchicalQuadkeyFormatter), HierarchicalQuadkeyFormatter)


def test_resolve_instance():
    formatter = HierarchicalQuadkeyFormatter(zoom_ceil=18)
    assert resolve_formatter(formatter) is formatter


def test_resolve_callable():
    formatter = resolve_formatter(lambda config, tile: f'{tile.zoom}-{tile.column}-{tile.row}')
    assert isinstance(formatter, CallableFormatter)

    config = TileSourceConfig.builder('https://tiles.example.com/', '{Z}').formatter(formatter).build()
    assert config.format_path(Tile(1, 2, 3)) == '3-1-2'


def test_resolve_invalid():
    with pytest.raises(InvalidConfiguration):
        resolve_formatter('bing')

    with pytest.raises(InvalidConfiguration):
        resolve_formatter(42)
