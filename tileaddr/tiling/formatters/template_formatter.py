from .tile_address_formatter import TileAddressFormatter


class TemplateFormatter(TileAddressFormatter):
    """按路径模板逐段替换占位符，例如`/{Z}/{X}/{Y}.png`

    模板片段中恰为单个字符`X`、`Y`、`Z`的片段分别替换为经过数据源投影后的列号、行号和等级，
    其余片段原样输出。
    """
    def format(self, config, tile) -> str:
        column, row, zoom = config.projection.apply(tile)
        substitutes = {'X': column, 'Y': row, 'Z': zoom}

        pieces = []
        for fragment in config.path_template:
            if len(fragment) == 1 and fragment in substitutes:
                pieces.append(str(substitutes[fragment]))
            else:
                pieces.append(fragment)

        return ''.join(pieces)
