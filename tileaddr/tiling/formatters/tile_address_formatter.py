from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..tile import Tile
    from ..tile_source_config import TileSourceConfig


class TileAddressFormatter(ABC):
    @abstractmethod
    def format(self, config: TileSourceConfig, tile: Tile) -> str:
        """将瓦片坐标转换为相对于数据源基地址的资源路径

        Parameters
        ----------
        config
            瓦片数据源配置
        tile
            瓦片坐标

        Returns
        -------
        path
            资源路径片段，同样的输入总是得到同样的输出
        """
        pass

    def __call__(self, config: TileSourceConfig, tile: Tile) -> str:
        return self.format(config, tile)

    def __repr__(self):
        return f'{type(self).__name__}()'

    def _key(self):
        """决定格式化器是否等价的参数，参数相同的格式化器生成的地址总是相同
        """
        return ()

    def __eq__(self, other):
        if not isinstance(other, TileAddressFormatter):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self), self._key()))
