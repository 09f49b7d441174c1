"""Core constants used across respack modules.

This module centralizes layout names and exchange-format defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

import os

DEFAULT_LOCALE = "default"
MODULE_CONTENT_DIR_NAME = "cartridge"
RESOURCES_DIR_PARTS = ("templates", "resources")
PROPERTIES_EXTENSION = ".properties"
PROPERTIES_ENCODING = "utf-8"
CSV_EXTENSION = ".csv"
JSON_EXTENSION = ".json"
ZIP_EXTENSION = ".zip"
ARCHIVER_METADATA_DIR = "__MACOSX"
ARCHIVER_SIDECAR_PREFIX = "._"
DEFAULT_KEY_HEADER = "Resource key"
DEFAULT_PACKAGE_PREFIX = "properties_"
DEFAULT_MODULE_GLOB = "./**/" + MODULE_CONTENT_DIR_NAME
DEFAULT_BASE_DIR = "."
DEFAULT_FIELD_SEPARATOR = ";"
DEFAULT_QUOTE_CHARACTER = '"'
DEFAULT_ESCAPE_CHARACTER = '"'
DEFAULT_EOL = os.linesep
DEFAULT_CSV_ENCODING = "utf-8"
SUPPORTED_EOLS = ("\n", "\r\n", "\r")
EOL_ALIASES = {
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
    "\\n": "\n",
    "\\r\\n": "\r\n",
    "\\r": "\r",
}
DEFAULT_FILE_FORMAT = "csv"
SUPPORTED_FILE_FORMATS = ("csv", "json")
