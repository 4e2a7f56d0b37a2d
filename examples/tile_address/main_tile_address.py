from tileaddr.tiling import Tile, TileSourceConfig, HierarchicalQuadkeyFormatter, TileProjection
from tileaddr.tiling import default_sources


def main():
    osm = default_sources.openstreetmap().build()
    siweidg = default_sources.siweidg_image().build()
    tms = (TileSourceConfig.builder('https://tms.example.com', '/{Z}/{X}/{Y}.png')
           .projection(TileProjection.bottom_left_origin())
           .credential('demo')
           .build())
    archive = (TileSourceConfig.builder('https://archive.example.com/', '{Z}/{X}/{Y}.webp')
               .formatter(HierarchicalQuadkeyFormatter(zoom_floor=0, zoom_ceil=18))
               .build())

    tile = Tile.of(13503, 6208, 14)
    for source in (osm, siweidg, tms, archive):
        print(source.tile_url(tile))

    bounds = [121.49238, 121.49824, 31.24027, 31.24345]  # 东方明珠
    for tile, url in osm.iter_tile_urls(bounds, 16):
        print(tile, url)


if __name__ == '__main__':
    main()
