# tmxload

`tmxload` reads maps saved by the Tiled map editor (`.tmx` files) into plain
Python objects. These include tilesets, tile layers, object groups and objects,
together with the custom properties attached to each of them. It uses only the
standard library.

It reads:

- tilesets embedded in the map, or stored in external tileset files and named by a `source` attribute;
- layer data given as plain XML `<tile gid="...">` elements, or as base64 text compressed with zlib;
- rectangle, ellipse, polygon and polyline objects;
- the horizontal, vertical and diagonal flip flags in tile and object gids.

## Installation

```
pip install tmxload
```

## Loading a map

```python
from tmxload.loader import load_map, MapLoadError

try:
    tiled_map = load_map("level1.tmx", "assets/maps")
except MapLoadError as error:
    print("could not load map:", error)
else:
    for tileset in tiled_map.tilesets:
        print(tileset.name, tileset.first_gid, tileset.image_source)
    for layer in tiled_map.layers:
        for tile in layer.tiles:
            print(tile.gid, tile.x, tile.y, tile.tileset_x, tile.tileset_y)
    for group in tiled_map.object_groups:
        for obj in group.objects:
            print(obj.name, obj.polygon_type, obj.vertices)
```

`load_map(map_file, map_path)` reads `map_file` from the directory `map_path` and
looks up external tilesets in that same directory. `parse_map(text, base_path)`
does the same work on map XML that is already in memory, as `str` or `bytes`.

`MapLoadError` is raised in the following cases:

- a file is missing;
- the XML is malformed;
- the `map`, `tileset`, tileset `image`, `layer` or layer `data` element is missing;
- a layer has no tiles;
- zlib data does not decompress to `width * height` gids;
- a gid belongs to no tileset.

A numeric attribute that cannot be read as a number raises `ValueError`.

Layers keep only the tiles that are not empty, which means gid 0 is skipped.
Each tile records the following:

- its pixel position on the map (`x`, `y`);
- the id of its tileset (`tileset_id`);
- its pixel position inside the tileset image (`tileset_x`, `tileset_y`).

## The model

The classes live in `tmxload.model`: `TiledMap`, `Tileset`, `Layer`, `Tile`,
`ObjectGroup` and `MapObject`. They are dataclasses. Maps, tilesets, layers,
object groups and objects carry a `properties` dict, and `get_property(key)`
returns an empty string when a key is missing. `Tileset.tile_properties` maps
a tile's local id to its own properties.

`TiledMap.tileset_from_gid(gid)` returns the tileset that owns a gid. It
raises `LookupError` when no tileset does. `split_gid(gid)` returns
`(gid, horizontal, vertical, diagonal)`, with the flip bits removed from the id.

## Event-driven access

`tmxload.extension.MapExtension` loads a map and reports every part of it to a
callback, one `Condition` at a time. The order is:

1. `MAP_LOADED`;
2. one `TILESET_LOADED` for each tileset;
3. for each layer, `LAYER_LOADED` followed by one `TILE_LOADED` for each of its tiles;
4. for each object group, `OBJECT_GROUP_LOADED` followed by one `OBJECT_LOADED` for each of its objects;
5. `PARSING_FINISHED`.

While the callback runs, the extension's accessor methods describe the element
that was just reported. Examples are `tileset_name()`, `layer_opacity()`,
`tile_position_on_map_x()`, `object_name()` and `is_object_polygon()`.

```python
from tmxload.extension import Condition, MapExtension

def on_event(condition):
    if condition is Condition.OBJECT_LOADED:
        print(extension.object_name(), extension.object_property("spawn", "no"))
    elif condition is Condition.RAISE_ERROR:
        print(extension.last_error())

extension = MapExtension(on_event)
extension.set_map_offset(100, 50)
extension.load_map("assets/maps/level1.tmx")
```

`load_map` on the extension does not raise. When loading fails, it stores the
message and fires `Condition.RAISE_ERROR`. `last_error()` returns that message,
or `"No errors"` when no load has failed.

`set_map_offset(x, y)` sets an offset that is added to the map positions of
tiles and objects. `tile_property(name, default)` looks up the property that the
owning tileset defines for the current tile. `object_vertices(default)` returns
the points of a polygon or polyline as written in the map.
`object_box2d_vertices(default)` returns the same points with every space
turned into a comma.

## What it does not do

`tmxload` only reads maps. It does not draw them, load tileset images, or
write `.tmx` files. It provides no command-line tool. Layer data in CSV, in
uncompressed base64 or in gzip is not supported.