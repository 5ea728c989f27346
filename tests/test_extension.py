import pytest

from tmxload.extension import Condition, MapExtension, path_from_file

MAP_XML = """<?xml version="1.0" encoding="UTF-8"?>
<map version="1.0" width="2" height="1" tilewidth="32" tileheight="32">
 <properties>
  <property name="music" value="theme"/>
 </properties>
 <tileset firstgid="1" name="ground" tilewidth="32" tileheight="32">
  <properties>
   <property name="kind" value="terrain"/>
  </properties>
  <image source="ground.png" width="64" height="32"/>
  <tile id="1">
   <properties>
    <property name="solid" value="yes"/>
   </properties>
  </tile>
 </tileset>
 <layer name="base" width="2" height="1" opacity="0.5">
  <properties>
   <property name="depth" value="back"/>
  </properties>
  <data>
   <tile gid="1"/>
   <tile gid="2"/>
  </data>
 </layer>
 <objectgroup name="things" draworder="topdown">
  <properties>
   <property name="group" value="g"/>
  </properties>
  <object id="7" name="wall" type="block" x="3.7" y="4.2" width="10" height="10">
   <properties>
    <property name="hp" value="9"/>
   </properties>
   <polygon points="0,0 10,0 10,10"/>
  </object>
 </objectgroup>
</map>
"""

NO_LAYER_XML = """<map version="1.0" width="1" height="1" tilewidth="32" tileheight="32">
 <tileset firstgid="1" name="t" tilewidth="32" tileheight="32">
  <image source="t.png" width="32" height="32"/>
 </tileset>
</map>
"""


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "level.tmx"
    path.write_text(MAP_XML)
    return str(path)


def _recording_extension():
    events = []
    ext = MapExtension(events.append)
    return ext, events


@pytest.mark.parametrize(
    "given, expected",
    [
        ("maps/level.tmx", "maps"),
        ("a\\b\\c.tmx", "a\\b"),
        ("level.tmx", "level.tmx"),
    ],
)
def test_path_from_file(given, expected):
    assert path_from_file(given) == expected


def test_defaults_before_loading():
    ext = MapExtension()
    assert ext.last_error() == "No errors"
    assert ext.map_width() == 0
    assert ext.map_property("k", "d") == "d"
    assert ext.layer_opacity() == 1.0
    assert ext.layer_visible() == 1
    assert ext.object_group_visible() == 1
    assert ext.object_id() == -1
    assert ext.object_visible() == 0
    assert ext.tile_property("solid", "no") == "no"
    assert ext.object_vertices("none") == "none"
    assert ext.is_object_polygon() is False


def test_event_order(map_file):
    ext, events = _recording_extension()
    ext.load_map(map_file)
    assert events == [
        Condition.MAP_LOADED,
        Condition.TILESET_LOADED,
        Condition.LAYER_LOADED,
        Condition.TILE_LOADED,
        Condition.TILE_LOADED,
        Condition.OBJECT_GROUP_LOADED,
        Condition.OBJECT_LOADED,
        Condition.PARSING_FINISHED,
    ]
    assert ext.last_error() == "No errors"


def test_map_and_tileset_values(map_file):
    ext, _ = _recording_extension()
    ext.load_map(map_file)
    assert ext.map_width() == 2
    assert ext.map_height() == 1
    assert ext.map_tile_width() == 32
    assert ext.map_version() == "1.0"
    assert ext.map_property("music", "none") == "theme"
    assert ext.map_property("missing", "none") == "none"
    assert ext.tileset_name() == "ground"
    assert ext.tileset_image_path() == "ground.png"
    assert ext.tileset_first_gid() == 1
    assert ext.tileset_property("kind", "") == "terrain"


def test_layer_values(map_file):
    ext, _ = _recording_extension()
    ext.load_map(map_file)
    assert ext.layer_name() == "base"
    assert ext.layer_opacity() == pytest.approx(0.5)
    assert ext.layer_visible() == 1
    assert ext.layer_property("depth", "") == "back"


def test_tiles_seen_during_events(map_file):
    ext = MapExtension()
    seen = []

    def handler(condition):
        if condition is Condition.TILE_LOADED:
            seen.append(
                (
                    ext.tile_gid(),
                    ext.tile_position_on_map_x(),
                    ext.current_tile.x,
                    ext.tile_property("solid", "no"),
                )
            )

    ext.on_event = handler
    ext.set_map_offset(10, 5)
    ext.load_map(map_file)
    assert seen == [(1, 10, 0, "no"), (2, 42, 32, "yes")]
    assert ext.tile_gid() == 2


def test_tile_position_on_map_uses_offset(map_file):
    ext = MapExtension()
    ext.set_map_offset(3, 4)
    ext.load_map(map_file)
    assert ext.tile_position_on_map_x() == ext.current_tile.x + 3
    assert ext.tile_position_on_map_y() == ext.current_tile.y + 4


def test_object_values(map_file):
    ext = MapExtension()
    ext.set_map_offset(100, 200)
    ext.load_map(map_file)
    assert ext.object_group_name() == "things"
    assert ext.object_group_draw_order() == "topdown"
    assert ext.object_group_property("group", "") == "g"
    assert ext.object_name() == "wall"
    assert ext.object_type() == "block"
    assert ext.object_id() == 7
    assert ext.object_position_on_map_x() == 103
    assert ext.object_position_on_map_y() == 204
    assert ext.object_width() == pytest.approx(10.0)
    assert ext.object_property("hp", "0") == "9"
    assert ext.is_object_polygon() is True
    assert ext.is_object_polyline() is False
    assert ext.is_object_ellipse() is False


def test_object_vertices(map_file):
    ext = MapExtension()
    ext.load_map(map_file)
    assert ext.object_vertices("") == "0,0 10,0 10,10"
    assert ext.object_box2d_vertices("") == "0,0,10,0,10,10"


def test_missing_file_reports_error(tmp_path):
    ext, events = _recording_extension()
    ext.load_map(str(tmp_path / "absent.tmx"))
    assert events == [Condition.RAISE_ERROR]
    assert ext.last_error().startswith("File not found")
    assert ext.current_map is None


def test_invalid_map_reports_error(tmp_path):
    path = tmp_path / "bad.tmx"
    path.write_text(NO_LAYER_XML)
    ext, events = _recording_extension()
    ext.load_map(str(path))
    assert events == [Condition.RAISE_ERROR]
    assert ext.last_error() == "Invalid tiled map: no layer tag"