from typing import Callable

from .tile_address_formatter import TileAddressFormatter


class CallableFormatter(TileAddressFormatter):
    def __init__(self, func: Callable):
        """使用任意函数 `func(config, tile) -> str` 作为格式化器

        Parameters
        ----------
        func
            路径生成函数，需要保证对同样的输入给出同样的结果
        """
        self.func = func

    def format(self, config, tile) -> str:
        return str(self.func(config, tile))

    def __repr__(self):
        name = getattr(self.func, '__qualname__', repr(self.func))
        return f'{type(self).__name__}({name})'

    def _key(self):
        return (self.func,)
