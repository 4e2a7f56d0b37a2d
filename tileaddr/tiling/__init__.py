from .constants import Viewport, WebMercator
from .exceptions import (
    TileAddressError,
    InvalidConfiguration,
    CoordinateOutOfRange,
    SchemeConsistencyError,
    TileAddressWarning,
)
from .tile import Tile, TileProjection
from .formatters import (
    TileAddressFormatter,
    TemplateFormatter,
    HierarchicalQuadkeyFormatter,
    CallableFormatter,
    resolve_formatter,
    pack_tile_id,
    unpack_tile_id,
)
from .tile_source_config import TileSourceConfig, parse_path_template
from . import default_sources
