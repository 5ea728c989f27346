"""Event-driven access to a loaded tiled map.

Loading walks the map and fires one event per element. While a handler
runs, the extension's current map, tileset, layer, tile, object group and
object point at the element being reported. The query methods read from
those, with neutral defaults when nothing is current.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from tmxload.loader import MapLoadError, load_map
from tmxload.model import Layer, MapObject, ObjectGroup, Tile, TiledMap, Tileset


def path_from_file(map_file: str) -> str:
    """Return the directory part of ``map_file``.

    Both ``/`` and ``\\`` separate directories. Without a separator the
    whole string is returned.
    """
    found = max(map_file.rfind("/"), map_file.rfind("\\"))
    return map_file if found < 0 else map_file[:found]


def _split_path(map_file: str) -> tuple[str, str]:
    found = max(map_file.rfind("/"), map_file.rfind("\\"))
    if found < 0:
        return ".", map_file
    return map_file[:found] or "/", map_file[found + 1:]


class Condition(Enum):
    """Events fired while a map is loaded."""

    RAISE_ERROR = "error"
    MAP_LOADED = "map_loaded"
    PARSING_FINISHED = "parsing_finished"
    TILESET_LOADED = "tileset_loaded"
    LAYER_LOADED = "layer_loaded"
    TILE_LOADED = "tile_loaded"
    OBJECT_GROUP_LOADED = "object_group_loaded"
    OBJECT_LOADED = "object_loaded"


def _lookup(properties: dict[str, str], name: str, default: str) -> str:
    return properties.get(name, default)


class MapExtension:
    """Loads maps and reports their contents through events."""

    def __init__(self, on_event: Callable[[Condition], None] | None = None) -> None:
        self.on_event = on_event
        self.offset_x = 0
        self.offset_y = 0
        self.error: str | None = None
        self.current_map: TiledMap | None = None
        self.current_tileset: Tileset | None = None
        self.current_layer: Layer | None = None
        self.current_tile: Tile | None = None
        self.current_object_group: ObjectGroup | None = None
        self.current_object: MapObject | None = None

    def _raise(self, condition: Condition) -> None:
        if self.on_event is not None:
            self.on_event(condition)

    # Actions

    def load_map(self, map_file: str) -> None:
        """Load ``map_file`` and fire an event for each of its parts.

        A failure is not raised: its message is stored and
        ``Condition.RAISE_ERROR`` is fired instead.
        """
        directory, name = _split_path(map_file)
        try:
            tiled_map = load_map(name, directory)
        except (MapLoadError, ValueError, OSError) as exc:
            self.error = str(exc)
            self._raise(Condition.RAISE_ERROR)
            return
        self.current_map = tiled_map
        self._raise(Condition.MAP_LOADED)
        for tileset in tiled_map.tilesets:
            self.current_tileset = tileset
            self._raise(Condition.TILESET_LOADED)
        for layer in tiled_map.layers:
            self.current_layer = layer
            self._raise(Condition.LAYER_LOADED)
            for tile in layer.tiles:
                self.current_tile = tile
                self._raise(Condition.TILE_LOADED)
        for group in tiled_map.object_groups:
            self.current_object_group = group
            self._raise(Condition.OBJECT_GROUP_LOADED)
            for obj in group.objects:
                self.current_object = obj
                self._raise(Condition.OBJECT_LOADED)
        self._raise(Condition.PARSING_FINISHED)

    def set_map_offset(self, offset_x: int, offset_y: int) -> None:
        """Set the offset added to tile and object positions on the map."""
        self.offset_x = offset_x
        self.offset_y = offset_y

    # Expressions: errors and map

    def last_error(self) -> str:
        """Return the message of the last load failure, or ``"No errors"``."""
        return self.error if self.error else "No errors"

    def map_width(self) -> int:
        return self.current_map.width if self.current_map else 0

    def map_height(self) -> int:
        return self.current_map.height if self.current_map else 0

    def map_tile_width(self) -> int:
        return self.current_map.tile_width if self.current_map else 0

    def map_tile_height(self) -> int:
        return self.current_map.tile_height if self.current_map else 0

    def map_orientation(self) -> str:
        return self.current_map.orientation if self.current_map else ""

    def map_version(self) -> str:
        return self.current_map.version if self.current_map else ""

    def map_property(self, name: str, default: str) -> str:
        """Return a property of the map, or ``default``."""
        if self.current_map is None:
            return default
        return _lookup(self.current_map.properties, name, default)

    # Tilesets

    def tileset_name(self) -> str:
        return self.current_tileset.name if self.current_tileset else ""

    def tileset_image_path(self) -> str:
        return self.current_tileset.image_source if self.current_tileset else ""

    def tileset_id(self) -> int:
        return self.current_tileset.id if self.current_tileset else 0

    def tileset_first_gid(self) -> int:
        return self.current_tileset.first_gid if self.current_tileset else 0

    def tileset_width(self) -> int:
        return self.current_tileset.width if self.current_tileset else 0

    def tileset_height(self) -> int:
        return self.current_tileset.height if self.current_tileset else 0

    def tileset_tile_width(self) -> int:
        return self.current_tileset.tile_width if self.current_tileset else 0

    def tileset_tile_height(self) -> int:
        return self.current_tileset.tile_height if self.current_tileset else 0

    def tileset_spacing(self) -> int:
        return self.current_tileset.spacing if self.current_tileset else 0

    def tileset_margin(self) -> int:
        return self.current_tileset.margin if self.current_tileset else 0

    def tileset_tile_offset_x(self) -> int:
        return self.current_tileset.offset_x if self.current_tileset else 0

    def tileset_tile_offset_y(self) -> int:
        return self.current_tileset.offset_y if self.current_tileset else 0

    def tileset_property(self, name: str, default: str) -> str:
        """Return a property of the current tileset, or ``default``."""
        if self.current_tileset is None:
            return default
        return _lookup(self.current_tileset.properties, name, default)

    # Layers

    def layer_name(self) -> str:
        return self.current_layer.name if self.current_layer else ""

    def layer_width(self) -> int:
        return self.current_layer.width if self.current_layer else 0

    def layer_height(self) -> int:
        return self.current_layer.height if self.current_layer else 0

    def layer_opacity(self) -> float:
        return self.current_layer.opacity if self.current_layer else 1.0

    def layer_visible(self) -> int:
        return self.current_layer.visible if self.current_layer else 1

    def layer_property(self, name: str, default: str) -> str:
        """Return a property of the current layer, or ``default``."""
        if self.current_layer is None:
            return default
        return _lookup(self.current_layer.properties, name, default)

    # Tiles

    def tile_gid(self) -> int:
        return self.current_tile.gid if self.current_tile else 0

    def tile_width(self) -> int:
        return self.current_tile.width if self.current_tile else 0

    def tile_height(self) -> int:
        return self.current_tile.height if self.current_tile else 0

    def tile_position_on_map_x(self) -> int:
        return self.current_tile.x + self.offset_x if self.current_tile else 0

    def tile_position_on_map_y(self) -> int:
        return self.current_tile.y + self.offset_y if self.current_tile else 0

    def tile_tileset_id(self) -> int:
        return self.current_tile.tileset_id if self.current_tile else 0

    def tile_position_on_tileset_x(self) -> int:
        return self.current_tile.tileset_x if self.current_tile else 0

    def tile_position_on_tileset_y(self) -> int:
        return self.current_tile.tileset_y if self.current_tile else 0

    def is_tile_flipped_horizontally(self) -> bool:
        return bool(self.current_tile and self.current_tile.flipped_horizontally)

    def is_tile_flipped_vertically(self) -> bool:
        return bool(self.current_tile and self.current_tile.flipped_vertically)

    def is_tile_flipped_diagonally(self) -> bool:
        return bool(self.current_tile and self.current_tile.flipped_diagonally)

    def tile_property(self, name: str, default: str) -> str:
        """Return a property of the current tile's tileset entry, or ``default``."""
        tile = self.current_tile
        if tile is None or self.current_map is None:
            return default
        tilesets = self.current_map.tilesets
        if not 0 <= tile.tileset_id < len(tilesets):
            return default
        tileset = tilesets[tile.tileset_id]
        properties = tileset.tile_properties.get(tile.gid - tileset.first_gid)
        if properties is None:
            return default
        return _lookup(properties, name, default)

    # Object groups

    def object_group_name(self) -> str:
        return self.current_object_group.name if self.current_object_group else ""

    def object_group_draw_order(self) -> str:
        group = self.current_object_group
        return group.draw_order if group else ""

    def object_group_width(self) -> int:
        return self.current_object_group.width if self.current_object_group else 0

    def object_group_height(self) -> int:
        return self.current_object_group.height if self.current_object_group else 0

    def object_group_opacity(self) -> float:
        group = self.current_object_group
        return group.opacity if group else 1.0

    def object_group_visible(self) -> int:
        return self.current_object_group.visible if self.current_object_group else 1

    def object_group_property(self, name: str, default: str) -> str:
        """Return a property of the current object group, or ``default``."""
        if self.current_object_group is None:
            return default
        return _lookup(self.current_object_group.properties, name, default)

    # Objects

    def object_name(self) -> str:
        return self.current_object.name if self.current_object else ""

    def object_type(self) -> str:
        return self.current_object.type if self.current_object else ""

    def object_position_on_map_x(self) -> int:
        obj = self.current_object
        return int(obj.x) + self.offset_x if obj else 0

    def object_position_on_map_y(self) -> int:
        obj = self.current_object
        return int(obj.y) + self.offset_y if obj else 0

    def object_width(self) -> float:
        return self.current_object.width if self.current_object else 0.0

    def object_height(self) -> float:
        return self.current_object.height if self.current_object else 0.0

    def object_rotation(self) -> float:
        return self.current_object.rotation if self.current_object else 0.0

    def object_tile_gid(self) -> int:
        return self.current_object.gid if self.current_object else 0

    def object_vertices(self, default: str) -> str:
        """Return the current object's points, or ``default`` if it has none."""
        obj = self.current_object
        if obj is None or not obj.vertices:
            return default
        return obj.vertices

    def object_box2d_vertices(self, default: str) -> str:
        """Return the object's points as one comma-separated list of numbers."""
        vertices = self.object_vertices(default)
        if self.current_object is None or not self.current_object.vertices:
            return vertices
        return vertices.replace(" ", ",")

    def is_object_polygon(self) -> bool:
        return bool(self.current_object and self.current_object.polygon_type == "polygon")

    def is_object_polyline(self) -> bool:
        return bool(self.current_object and self.current_object.polygon_type == "polyline")

    def is_object_ellipse(self) -> bool:
        return bool(self.current_object and self.current_object.polygon_type == "ellipse")

    def is_object_flipped_horizontally(self) -> bool:
        return bool(self.current_object and self.current_object.flipped_horizontally)

    def is_object_flipped_vertically(self) -> bool:
        return bool(self.current_object and self.current_object.flipped_vertically)

    def is_object_flipped_diagonally(self) -> bool:
        return bool(self.current_object and self.current_object.flipped_diagonally)

    def object_visible(self) -> int:
        return self.current_object.visible if self.current_object else 0

    def object_property(self, name: str, default: str) -> str:
        """Return a property of the current object, or ``default``."""
        if self.current_object is None:
            return default
        return _lookup(self.current_object.properties, name, default)

    def object_id(self) -> int:
        return self.current_object.id if self.current_object else -1