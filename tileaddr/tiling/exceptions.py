class TileAddressError(Exception):
    pass


class InvalidConfiguration(TileAddressError, ValueError):
    def __init__(self, field: str, reason: str):
        super().__init__(field, reason)

    @property
    def field(self):
        return self.args[0]

    @property
    def reason(self):
        return self.args[1]

    def __str__(self):
        return f'Invalid `{self.field}`: {self.reason}'


class CoordinateOutOfRange(TileAddressError, ValueError):
    def __init__(self, name: str, value, limit=None):
        super().__init__(name, value, limit)

    @property
    def name(self):
        return self.args[0]

    @property
    def value(self):
        return self.args[1]

    @property
    def limit(self):
        return self.args[2]

    def __str__(self):
        if self.limit is None:
            return f'Tile `{self.name}` must be a non-negative integer, got `{self.value!r}`.'
        else:
            return f'Tile `{self.name}` ({self.value}) exceeds packing capacity (< {self.limit}).'


class SchemeConsistencyError(TileAddressError, AssertionError):
    """层级路径中出现超出 [0, 16) 的分量，说明瓦片坐标与等级不匹配，而不是应当被截断的输入
    """
    pass


class TileAddressWarning(UserWarning):
    pass
