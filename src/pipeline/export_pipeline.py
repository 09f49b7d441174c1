"""Export workflow: module directories to an exchange package."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from core.config import RespackConfig
from core.constants import DEFAULT_PACKAGE_PREFIX, JSON_EXTENSION, ZIP_EXTENSION
from core.errors import RespackConfigError
from core.events import EventChannel
from core.locales import is_valid_locale
from core.logging_config import get_logger
from core.types import ExportOptions, ExportRequest
from resources.pack import ResourcePack
from transcode.archive import write_zip
from transcode.json_format import write_json_document

_LOGGER = get_logger(__name__)


def export_package(
    request: ExportRequest,
    config: RespackConfig,
    events: EventChannel | None = None,
) -> Path:
    """Read module resource files and write them as one exchange package.

    Args:
        request: Export request.
        config: Runtime configuration providing the CSV dialect.
        events: Optional lifecycle event channel.

    Returns:
        Path of the written zip archive or JSON document.

    Raises:
        RespackConfigError: If the filter locales are not locale codes.
        RespackSourceError: If module paths or resource files cannot be read.
        RespackArchiveError: If the package cannot be written.
    """
    _validate_filter_locales(request.if_not_locales)
    out_name = request.out_name or build_package_name()
    options = ExportOptions(
        out_name=out_name,
        if_not_locales=request.if_not_locales,
        dialect=config.dialect(),
        preserve_line_breaks=request.preserve_line_breaks,
    )
    pack = ResourcePack.from_modules(list(request.module_paths), events)
    output_dir = Path(request.output_dir).expanduser()
    if request.file_format == "json":
        document = pack.to_json(options, events)
        package_path = write_json_document(document, output_dir / f"{out_name}{JSON_EXTENSION}")
    else:
        package = pack.to_tabular_package(options, events)
        package_path = write_zip(package, output_dir / f"{out_name}{ZIP_EXTENSION}")
    summary = pack.summary()
    _LOGGER.info(
        "export_completed",
        package_path=str(package_path),
        file_format=request.file_format,
        modules=summary.modules,
        bundles=summary.bundles,
        resources=summary.resources,
        if_not_locales=list(request.if_not_locales),
    )
    return package_path


def build_package_name() -> str:
    """Build a unique default package name from the current UTC time."""
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
    return f"{DEFAULT_PACKAGE_PREFIX}{timestamp}"


def _validate_filter_locales(locales: tuple[str, ...]) -> None:
    """Reject filter values that can never match a locale column."""
    invalid = [locale for locale in locales if not is_valid_locale(locale)]
    if invalid:
        raise RespackConfigError(
            f"Invalid --if-not locale(s): {', '.join(invalid)}. "
            "Use codes such as fr, fr_CA, or default."
        )
