from __future__ import annotations

from typing import Iterable
from urllib.parse import urlsplit

from .constants import Viewport, WebMercator
from .exceptions import InvalidConfiguration
from .formatters import resolve_formatter, TileAddressFormatter
from .tile import Tile, TileProjection

Placeholders = ('X', 'Y', 'Z')


def parse_path_template(template: str | None) -> tuple[str, ...]:
    """将路径模板按花括号拆分为字面量与占位符交替的片段序列

    Parameters
    ----------
    template
        路径模板，例如`/{Z}/{X}/{Y}.png`

    Returns
    -------
    fragments
        片段序列，偶数位为字面量（可能为空串），奇数位为占位符，
        例如`('/', 'Z', '/', 'X', '/', 'Y', '.png')`

    Raises
    ------
    InvalidConfiguration
        模板为空、花括号不匹配、出现未知占位符，或字面量片段恰为单个占位符字符
    """
    if not template:
        raise InvalidConfiguration('template', 'path template cannot be empty.')

    fragments = []
    current = []
    in_placeholder = False
    for i, ch in enumerate(template):
        if ch == '{':
            if in_placeholder:
                raise InvalidConfiguration('template', f'nested `{{` at position {i} in `{template}`.')
            fragments.append(''.join(current))
            current = []
            in_placeholder = True
        elif ch == '}':
            if not in_placeholder:
                raise InvalidConfiguration('template', f'unmatched `}}` at position {i} in `{template}`.')
            placeholder = ''.join(current)
            if placeholder not in Placeholders:
                raise InvalidConfiguration('template', f'unknown placeholder `{{{placeholder}}}` in `{template}`,'
                                                       f' expected one of {{X}}, {{Y}} or {{Z}}.')
            fragments.append(placeholder)
            current = []
            in_placeholder = False
        else:
            current.append(ch)

    if in_placeholder:
        raise InvalidConfiguration('template', f'unclosed `{{` in `{template}`.')
    fragments.append(''.join(current))

    for literal in fragments[::2]:
        if literal in Placeholders:
            raise InvalidConfiguration('template', f'literal fragment `{literal}` in `{template}`'
                                                   f' is indistinguishable from a placeholder.')

    return tuple(fragments)


def check_base_address(url: str | None) -> str:
    if not url:
        raise InvalidConfiguration('url', 'base address cannot be empty.')

    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidConfiguration('url', f'malformed base address `{url}` ({e}).') from e

    if not parts.scheme or not parts.netloc:
        raise InvalidConfiguration('url', f'`{url}` is not an absolute URL.')

    return url


class TileSourceConfig:
    DefaultCredentialName = 'key'

    def __init__(self,
                 url: str,
                 template: str,
                 zoom_min: int | None = None,
                 zoom_max: int | None = None,
                 credential_name: str | None = None,
                 credential: str | None = None,
                 formatter=None,
                 projection: TileProjection | None = None,
                 map_type: str | None = None):
        """瓦片数据源配置，构造完成后不可修改，可在多线程间直接共享

        Parameters
        ----------
        url
            数据源基地址，需要为绝对URL
        template
            路径模板，使用`{X}`、`{Y}`、`{Z}`作为列号、行号、等级的占位符
        zoom_min, zoom_max
            数据源支持的等级范围，默认为Viewport的最小、最大等级
        credential_name
            访问凭证的查询参数名，默认为`key`
        credential
            访问凭证，为空时地址不附加查询参数
        formatter
            地址格式化器，参见 `resolve_formatter`，默认使用模板格式化器
        projection
            瓦片坐标到地址坐标的映射钩子，默认不做变换
        map_type
            数据源的图层类型标记，例如`vect`、`image`，不参与地址生成

        Raises
        ------
        InvalidConfiguration
            基地址非法、模板非法、等级范围倒置或格式化器无法识别
        """
        if zoom_min is None:
            zoom_min = Viewport.MIN_ZOOM_LEVEL
        if zoom_max is None:
            zoom_max = Viewport.MAX_ZOOM_LEVEL
        if credential_name is None:
            credential_name = TileSourceConfig.DefaultCredentialName
        if projection is None:
            projection = TileProjection.identity()

        if zoom_min > zoom_max:
            raise InvalidConfiguration('zoom_min', f'{zoom_min} is greater than zoom_max ({zoom_max}).')

        self._base_address = check_base_address(url)
        self._template = template
        self._path_template = parse_path_template(template)
        self._zoom_min = zoom_min
        self._zoom_max = zoom_max
        self._credential_name = credential_name
        self._credential_value = credential
        self._formatter = resolve_formatter(formatter)
        self._projection = projection
        self._map_type = map_type

    @staticmethod
    def builder(url=None, template=None, zoom_min=None, zoom_max=None) -> TileSourceConfig.Builder:
        return TileSourceConfig.Builder(url, template, zoom_min, zoom_max)

    @property
    def base_address(self) -> str:
        return self._base_address

    @property
    def template(self) -> str:
        return self._template

    @property
    def path_template(self) -> tuple[str, ...]:
        return self._path_template

    @property
    def path_suffix(self) -> str:
        """模板最后一个字面量片段，一般为文件扩展名，例如`.png`
        """
        return self._path_template[-1]

    @property
    def zoom_min(self) -> int:
        return self._zoom_min

    @property
    def zoom_max(self) -> int:
        return self._zoom_max

    @property
    def credential_name(self) -> str:
        return self._credential_name

    @property
    def credential_value(self) -> str | None:
        return self._credential_value

    @property
    def formatter(self) -> TileAddressFormatter:
        return self._formatter

    @property
    def projection(self) -> TileProjection:
        return self._projection

    @property
    def map_type(self) -> str | None:
        return self._map_type

    def supports_zoom(self, zoom) -> bool:
        return self.zoom_min <= zoom <= self.zoom_max

    def format_path(self, tile: Tile) -> str:
        return self.formatter.format(self, tile)

    def tile_url(self, tile: Tile) -> str:
        """拼接瓦片的完整资源地址

        Returns
        -------
        url
            `base_address + 格式化路径`，若配置了访问凭证则附加`?<credential_name>=<credential_value>`
        """
        url = self.base_address + self.format_path(tile)
        if self.credential_value is not None:
            url += '?' + self.credential_name + '=' + self.credential_value

        return url

    def iter_tile_urls(self, bounds, zoom: int) -> Iterable[tuple[Tile, str]]:
        """遍历覆盖给定WGS 84边界的全部瓦片地址

        Parameters
        ----------
        bounds
            WGS 84坐标边界，以[lon_min, lon_max, lat_min, lat_max]顺序提供
        zoom
            缩放等级

        Returns
        -------
        tiles_and_urls
            (瓦片, 地址)序列，瓦片坐标采用左上原点约定
        """
        for col, row in WebMercator.iter_tiles(bounds, zoom):
            tile = Tile(col, row, zoom)
            yield tile, self.tile_url(tile)

    def with_credential(self, credential: str | None) -> TileSourceConfig:
        """替换访问凭证，返回新的配置，原配置不受影响
        """
        return self.to_builder().credential(credential).build()

    def to_builder(self) -> TileSourceConfig.Builder:
        return (TileSourceConfig.builder(self.base_address, self.template, self.zoom_min, self.zoom_max)
                .credential_name(self.credential_name)
                .credential(self.credential_value)
                .formatter(self.formatter)
                .projection(self.projection)
                .map_type(self.map_type))

    def __eq__(self, other):
        if not isinstance(other, TileSourceConfig):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        return (self.base_address, self.path_template, self.zoom_min, self.zoom_max,
                self.credential_name, self.credential_value, self.formatter, self.projection, self.map_type)

    def __repr__(self):
        credential = '' if self.credential_value is None else f', {self.credential_name}=***'
        return (f'{type(self).__name__}({self.base_address!r}, {self.template!r},'
                f' zoom=[{self.zoom_min}, {self.zoom_max}], formatter={self.formatter!r}{credential})')

    class Builder:
        def __init__(self, url=None, template=None, zoom_min=None, zoom_max=None):
            """收集瓦片数据源配置，全部校验推迟到 `build` 时进行
            """
            self._url = url
            self._template = template
            self._zoom_min = zoom_min
            self._zoom_max = zoom_max
            self._credential_name = None
            self._credential = None
            self._formatter = None
            self._projection = None
            self._map_type = None

        def url(self, url):
            self._url = url
            return self

        def template(self, template):
            self._template = template
            return self

        def zoom_min(self, zoom_min):
            self._zoom_min = zoom_min
            return self

        def zoom_max(self, zoom_max):
            self._zoom_max = zoom_max
            return self

        def credential_name(self, name):
            self._credential_name = name
            return self

        def credential(self, credential):
            self._credential = credential
            return self

        def formatter(self, formatter):
            self._formatter = formatter
            return self

        def projection(self, projection):
            self._projection = projection
            return self

        def map_type(self, map_type):
            self._map_type = map_type
            return self

        def build(self) -> TileSourceConfig:
            return TileSourceConfig(
                url=self._url,
                template=self._template,
                zoom_min=self._zoom_min,
                zoom_max=self._zoom_max,
                credential_name=self._credential_name,
                credential=self._credential,
                formatter=self._formatter,
                projection=self._projection,
                map_type=self._map_type,
            )
