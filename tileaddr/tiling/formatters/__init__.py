from .tile_address_formatter import TileAddressFormatter
from .template_formatter import TemplateFormatter
from .hierarchical_quadkey_formatter import HierarchicalQuadkeyFormatter
from .callable_formatter import CallableFormatter
from .tile_id import pack_tile_id, unpack_tile_id

from ..exceptions import InvalidConfiguration

FormatterTemplate = 'template'
FormatterQuadkey = 'quadkey'

_named_formatters = {
    FormatterTemplate: TemplateFormatter,
    FormatterQuadkey: HierarchicalQuadkeyFormatter,
    'hierarchical_quadkey': HierarchicalQuadkeyFormatter,
}


def resolve_formatter(formatter=None) -> TileAddressFormatter:
    """根据给定描述选择格式化器

    Parameters
    ----------
    formatter
        None或`'template'`使用模板格式化器，
        `'quadkey'`或`'hierarchical_quadkey'`使用分级目录格式化器，
        TileAddressFormatter实例原样返回，TileAddressFormatter子类会以默认参数实例化，
        其他可调用对象会被包装为CallableFormatter

    Returns
    -------
    formatter
        格式化器实例
    """
    if formatter is None:
        formatter = FormatterTemplate

    if isinstance(formatter, TileAddressFormatter):
        return formatter
    elif isinstance(formatter, type) and issubclass(formatter, TileAddressFormatter):
        return formatter()
    elif isinstance(formatter, str):
        key = formatter.lower()
        if key not in _named_formatters:
            choices = ', '.join(f'`{k}`' for k in _named_formatters)
            raise InvalidConfiguration('formatter', f'unknown formatter `{formatter}`, expected one of {choices}.')
        return _named_formatters[key]()
    elif callable(formatter):
        return CallableFormatter(formatter)
    else:
        raise InvalidConfiguration('formatter', f'`{formatter!r}` is neither a formatter nor callable.')
