"""Reading tiled maps (TMX) and their external tilesets from XML."""

from __future__ import annotations

import os
import struct
import xml.etree.ElementTree as ET
import zlib

from tmxload.base64codec import decode as b64decode
from tmxload.model import Layer, MapObject, ObjectGroup, Tile, TiledMap, Tileset
from tmxload.textutil import trim
from tmxload.xmlelement import XMLElement


class MapLoadError(Exception):
    """Raised when a map or one of its tilesets cannot be read."""


def load_map(map_file: str, map_path: str = ".") -> TiledMap:
    """Load the map ``map_file`` found relative to ``map_path``.

    External tilesets named by the map are also looked up relative to
    ``map_path``.
    """
    path = os.path.join(map_path, map_file)
    try:
        with open(path, "rb") as handle:
            content = handle.read()
    except OSError as exc:
        raise MapLoadError(f"File not found: {map_path}/{map_file}") from exc
    return parse_map(content, map_path)


def parse_map(text: str | bytes, base_path: str = ".") -> TiledMap:
    """Build a map from TMX text; external tilesets are read from ``base_path``."""
    root = _parse_xml(text, "map")
    if root is None:
        raise MapLoadError("Invalid tiled map: no map tag")
    element = XMLElement(root)
    tiled_map = TiledMap(
        version=element.get_string("version"),
        width=element.get_int("width"),
        height=element.get_int("height"),
        tile_width=element.get_int("tilewidth"),
        tile_height=element.get_int("tileheight"),
    )
    tiled_map.parse_properties(root)
    _load_tilesets(tiled_map, root, base_path)
    _load_layers(tiled_map, root)
    _load_object_groups(tiled_map, root)
    return tiled_map


def _parse_xml(text: str | bytes, tag: str) -> ET.Element | None:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise MapLoadError(f"XML parse error: {exc}") from exc
    return root if root.tag == tag else None


def _load_tilesets(tiled_map: TiledMap, root: ET.Element, base_path: str) -> None:
    nodes = root.findall("tileset")
    if not nodes:
        raise MapLoadError("Invalid tiled map: no tileset tag")
    for tileset_id, node in enumerate(nodes):
        element = XMLElement(node)
        source = element.get_string("source", None)
        if source is not None:
            _load_external_tileset(
                tiled_map, tileset_id, source, element.get_int("firstgid"), base_path
            )
        else:
            _add_tileset(tiled_map, tileset_id, node)


def _load_external_tileset(
    tiled_map: TiledMap, tileset_id: int, tileset_file: str, first_gid: int, base_path: str
) -> None:
    try:
        with open(os.path.join(base_path, tileset_file), "rb") as handle:
            content = handle.read()
    except OSError as exc:
        raise MapLoadError(f"File not found (external tileset) : {tileset_file}") from exc
    node = _parse_xml(content, "tileset")
    if node is None:
        raise MapLoadError(
            f"Invalid tiled map: no tileset tag (external tileset {tileset_file})"
        )
    _add_tileset(tiled_map, tileset_id, node, first_gid)


def _add_tileset(
    tiled_map: TiledMap, tileset_id: int, node: ET.Element, first_gid: int = 0
) -> None:
    image_node = node.find("image")
    if image_node is None:
        raise MapLoadError("Invalid tiled map: no tileset image tag")
    element = XMLElement(node)
    image = XMLElement(image_node)
    offset_node = node.find("tileoffset")
    if offset_node is not None:
        offset = XMLElement(offset_node)
        offset_x, offset_y = offset.get_int("x"), offset.get_int("y")
    else:
        offset_x = offset_y = 0
    tileset = Tileset(
        id=tileset_id,
        first_gid=first_gid or element.get_int("firstgid"),
        name=element.get_string("name"),
        tile_width=element.get_int("tilewidth"),
        tile_height=element.get_int("tileheight"),
        spacing=element.get_int("spacing"),
        margin=element.get_int("margin"),
        image_source=image.get_string("source"),
        width=image.get_int("width"),
        height=image.get_int("height"),
        offset_x=offset_x,
        offset_y=offset_y,
    )
    tileset.parse_properties(node)
    _parse_tile_properties(tileset, node)
    tiled_map.add_tileset(tileset)


def _parse_tile_properties(tileset: Tileset, node: ET.Element) -> None:
    for tile_node in node.iterfind("tile"):
        container = tile_node.find("properties")
        if container is None:
            continue
        tile_id = XMLElement(tile_node).get_int("id")
        for prop in container.iterfind("property"):
            element = XMLElement(prop)
            tileset.add_tile_property(
                tile_id, element.get_string("name"), element.get_string("value")
            )


def _load_layers(tiled_map: TiledMap, root: ET.Element) -> None:
    nodes = root.findall("layer")
    if not nodes:
        raise MapLoadError("Invalid tiled map: no layer tag")
    for layer_id, node in enumerate(nodes):
        data_node = node.find("data")
        if data_node is None:
            raise MapLoadError("Invalid tiled map : no layer data tag")
        element = XMLElement(node)
        layer = Layer(
            id=layer_id,
            name=element.get_string("name"),
            width=element.get_int("width"),
            height=element.get_int("height"),
            visible=element.get_int("visible", 1),
            opacity=element.get_float("opacity", 1.0),
        )
        layer.parse_properties(node)
        _load_layer_tiles(tiled_map, layer, data_node)
        tiled_map.add_layer(layer)


def _layer_gids(layer: Layer, data_node: ET.Element):
    data = XMLElement(data_node)
    if data.get_string("encoding").startswith("base64") and data.get_string(
        "compression"
    ).startswith("zlib"):
        compressed = b64decode(trim(data.get_value()))
        expected = layer.width * layer.height * 4
        try:
            raw = zlib.decompress(compressed)
        except zlib.error as exc:
            raise MapLoadError("Zlib error: uncompression failed") from exc
        if len(raw) != expected:
            raise MapLoadError("Zlib error: uncompression failed")
        return (gid for (gid,) in struct.iter_unpack("<I", raw))
    tile_nodes = data_node.findall("tile")
    if not tile_nodes:
        raise MapLoadError(
            "Invalid tiled map: no tiles (only plain XML or ZLIB supported)"
        )
    return (XMLElement(tile).get_unsigned_int("gid") for tile in tile_nodes)


def _load_layer_tiles(tiled_map: TiledMap, layer: Layer, data_node: ET.Element) -> None:
    for index, gid in enumerate(_layer_gids(layer, data_node)):
        if gid:
            layer.add_tile(_create_tile(tiled_map, layer, gid, index))


def _create_tile(tiled_map: TiledMap, layer: Layer, gid: int, index: int) -> Tile:
    tile = Tile()
    tile.set_gid(gid)
    try:
        tileset = tiled_map.tileset_from_gid(tile.gid)
    except LookupError as exc:
        raise MapLoadError(str(exc)) from exc
    column, row = index % layer.width, index // layer.width
    tile.width = tileset.tile_width
    tile.height = tileset.tile_height
    tile.x = column * tileset.tile_width + tileset.offset_x
    tile.y = row * tileset.tile_height + tileset.offset_y
    tile.tileset_id = tileset.id
    tile.tileset_x = tileset.tile_position_x(tile)
    tile.tileset_y = tileset.tile_position_y(tile)
    return tile


def _load_object_groups(tiled_map: TiledMap, root: ET.Element) -> None:
    for node in root.iterfind("objectgroup"):
        element = XMLElement(node)
        group = ObjectGroup(
            name=element.get_string("name"),
            draw_order=element.get_string("draworder"),
            width=element.get_int("width"),
            height=element.get_int("height"),
            visible=element.get_int("visible", 1),
            opacity=element.get_float("opacity", 1.0),
        )
        group.parse_properties(node)
        for object_node in node.iterfind("object"):
            group.add_object(_load_object(object_node))
        tiled_map.add_object_group(group)


def _load_object(node: ET.Element) -> MapObject:
    element = XMLElement(node)
    obj = MapObject(
        id=element.get_int("id", -1),
        name=element.get_string("name"),
        type=element.get_string("type"),
        x=element.get_float("x"),
        y=element.get_float("y"),
        width=element.get_float("width"),
        height=element.get_float("height"),
        rotation=element.get_float("rotation"),
        visible=element.get_int("visible", 1),
    )
    obj.set_gid(element.get_int("gid", -1))
    if node.find("ellipse") is not None:
        obj.polygon_type = "ellipse"
    for shape in ("polygon", "polyline"):
        shape_node = node.find(shape)
        if shape_node is not None:
            obj.polygon_type = shape
            obj.vertices = XMLElement(shape_node).get_string("points")
    obj.parse_properties(node)
    return obj