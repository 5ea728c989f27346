"""Load Tiled TMX maps into tilesets, layers, tiles, object groups and objects."""

__version__ = "1.0.0"
__all__ = ["textutil", "base64codec", "xmlelement", "properties", "model", "loader", "extension"]