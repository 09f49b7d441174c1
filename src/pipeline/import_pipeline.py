"""Import workflow: exchange package back into resource files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.config import RespackConfig
from core.constants import JSON_EXTENSION
from core.events import EventChannel
from core.logging_config import get_logger
from core.types import ImportOptions, ImportRequest, ParseOptions
from resources.pack import ResourcePack
from resources.summary import PackSummary
from transcode.archive import read_zip
from transcode.json_format import read_json_document

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ImportResult:
    """Outcome of one import run.

    Attributes:
        summary: Counts of what the package contributed.
        written_files: Resource files created or updated.
    """

    summary: PackSummary
    written_files: tuple[Path, ...]


def import_package(
    request: ImportRequest,
    config: RespackConfig,
    events: EventChannel | None = None,
) -> ImportResult:
    """Merge an exchange package into the resource files of its modules.

    Args:
        request: Import request.
        config: Runtime configuration providing base directory, dialect, and encoding.
        events: Optional lifecycle event channel.

    Returns:
        Summary of the merged pack and the files written.

    Raises:
        RespackArchiveError: If the package cannot be read.
        RespackParseError: If a CSV member cannot be parsed.
        RespackImportError: If a resource file cannot be written.
    """
    pack = load_package(Path(request.package_path).expanduser(), config, events)
    options = ImportOptions(
        ignore_if_empty=request.ignore_if_empty,
        escape_special=request.escape_special,
    )
    written_files = pack.save(options, events)
    summary = pack.summary()
    _LOGGER.info(
        "import_completed",
        package_path=request.package_path,
        modules=summary.modules,
        bundles=summary.bundles,
        resources=summary.resources,
        files_written=len(written_files),
    )
    return ImportResult(summary=summary, written_files=tuple(written_files))


def load_package(
    package_path: Path,
    config: RespackConfig,
    events: EventChannel | None = None,
) -> ResourcePack:
    """Read a zip or JSON package into a resource pack without saving it."""
    options = ParseOptions(
        base_directory=config.base_directory,
        dialect=config.dialect(),
        encoding=config.encoding,
    )
    if package_path.suffix.lower() == JSON_EXTENSION:
        return ResourcePack.from_json(read_json_document(package_path), options, events)
    return ResourcePack.from_tabular_package(read_zip(package_path), options, events)
