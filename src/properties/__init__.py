"""Reading and formatting-preserving editing of ``.properties`` files."""

from properties.editor import PropertiesEditor
from properties.property import Property
from properties.reader import parse_properties, read_properties_file

__all__ = ["Property", "PropertiesEditor", "parse_properties", "read_properties_file"]
