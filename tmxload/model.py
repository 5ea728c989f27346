"""In-memory model of a tiled map: tilesets, layers, tiles and objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from tmxload.properties import PropertyHolder

FLIPPED_HORIZONTALLY_FLAG = 0x80000000
FLIPPED_VERTICALLY_FLAG = 0x40000000
FLIPPED_DIAGONALLY_FLAG = 0x20000000
_FLIP_MASK = FLIPPED_HORIZONTALLY_FLAG | FLIPPED_VERTICALLY_FLAG | FLIPPED_DIAGONALLY_FLAG
_UINT_MASK = 0xFFFFFFFF


def split_gid(gid: int) -> tuple[int, bool, bool, bool]:
    """Split a raw global tile id into the bare id and its flip flags.

    The id is taken as an unsigned 32-bit value, so negative input wraps
    around. Returns ``(gid, horizontal, vertical, diagonal)``.
    """
    raw = gid & _UINT_MASK
    return (
        raw & ~_FLIP_MASK & _UINT_MASK,
        bool(raw & FLIPPED_HORIZONTALLY_FLAG),
        bool(raw & FLIPPED_VERTICALLY_FLAG),
        bool(raw & FLIPPED_DIAGONALLY_FLAG),
    )


@dataclass
class Tile:
    """A placed tile of a layer."""

    gid: int = 0
    flipped_horizontally: bool = False
    flipped_vertically: bool = False
    flipped_diagonally: bool = False
    width: int = 0
    height: int = 0
    x: int = 0
    y: int = 0
    tileset_id: int = 0
    tileset_x: int = 0
    tileset_y: int = 0

    def set_gid(self, gid: int) -> None:
        """Set the global id from a raw value, extracting the flip flags."""
        (
            self.gid,
            self.flipped_horizontally,
            self.flipped_vertically,
            self.flipped_diagonally,
        ) = split_gid(gid)


@dataclass
class Tileset(PropertyHolder):
    """A tileset image cut into tiles, with per-tile properties."""

    id: int = 0
    first_gid: int = 0
    name: str = ""
    image_source: str = ""
    width: int = 0
    height: int = 0
    tile_width: int = 0
    tile_height: int = 0
    spacing: int = 0
    margin: int = 0
    offset_x: int = 0
    offset_y: int = 0
    tile_properties: dict[int, dict[str, str]] = field(default_factory=dict)

    def add_tile_property(self, tile_id: int, name: str, value: str) -> None:
        """Set a property of the tile with the given local id."""
        self.tile_properties.setdefault(tile_id, {})[name] = value

    def _columns(self, tile_extent: int) -> int:
        return self.width // (tile_extent + self.spacing)

    def tile_position_x(self, tile: Tile) -> int:
        """Return the x pixel position of the tile inside the tileset image."""
        pos = (tile.gid - self.first_gid) % self._columns(self.tile_width)
        return pos * self.tile_width + self.margin + self.spacing * pos

    def tile_position_y(self, tile: Tile) -> int:
        """Return the y pixel position of the tile inside the tileset image."""
        pos = (tile.gid - self.first_gid) // self._columns(self.tile_height)
        return pos * self.tile_height + self.margin + self.spacing * pos

    def tile_count(self) -> int:
        """Return how many tiles the tileset image holds."""
        rows = self.height // (self.tile_height + self.spacing)
        return self._columns(self.tile_width) * rows


@dataclass
class Layer(PropertyHolder):
    """A tile layer."""

    id: int = 0
    name: str = ""
    width: int = 0
    height: int = 0
    opacity: float = 1.0
    visible: int = 1
    tiles: list[Tile] = field(default_factory=list)

    def add_tile(self, tile: Tile) -> None:
        """Append a tile to the layer."""
        self.tiles.append(tile)


@dataclass
class MapObject(PropertyHolder):
    """An object of an object group: a shape, a point or a tile object."""

    id: int = 0
    gid: int = 0
    flipped_horizontally: bool = False
    flipped_vertically: bool = False
    flipped_diagonally: bool = False
    name: str = ""
    type: str = ""
    polygon_type: str = ""
    vertices: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    rotation: float = 0.0
    visible: int = 1

    def set_gid(self, gid: int) -> None:
        """Set the global id from a raw value, extracting the flip flags."""
        (
            self.gid,
            self.flipped_horizontally,
            self.flipped_vertically,
            self.flipped_diagonally,
        ) = split_gid(gid)


@dataclass
class ObjectGroup(PropertyHolder):
    """A layer of objects."""

    name: str = ""
    draw_order: str = ""
    width: int = 0
    height: int = 0
    opacity: float = 1.0
    visible: int = 1
    objects: list[MapObject] = field(default_factory=list)

    def add_object(self, obj: MapObject) -> None:
        """Append an object to the group."""
        self.objects.append(obj)


@dataclass
class TiledMap(PropertyHolder):
    """A whole map with its tilesets, tile layers and object groups."""

    version: str = ""
    orientation: str = ""
    width: int = 0
    height: int = 0
    tile_width: int = 0
    tile_height: int = 0
    tilesets: list[Tileset] = field(default_factory=list)
    layers: list[Layer] = field(default_factory=list)
    object_groups: list[ObjectGroup] = field(default_factory=list)

    def add_tileset(self, tileset: Tileset) -> None:
        """Append a tileset."""
        self.tilesets.append(tileset)

    def add_layer(self, layer: Layer) -> None:
        """Append a tile layer."""
        self.layers.append(layer)

    def add_object_group(self, object_group: ObjectGroup) -> None:
        """Append an object group."""
        self.object_groups.append(object_group)

    def tileset_from_gid(self, gid: int) -> Tileset:
        """Return the first tileset whose id range holds ``gid``.

        Raises ``LookupError`` if no tileset does.
        """
        for tileset in self.tilesets:
            if tileset.first_gid <= gid < tileset.first_gid + tileset.tile_count():
                return tileset
        raise LookupError("Tileset not found")