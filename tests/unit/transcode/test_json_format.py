"""Unit tests for the JSON exchange document."""

from __future__ import annotations

import json
from typing import Mapping

import pytest

from core.errors import RespackArchiveError
from core.events import EventChannel
from core.types import ParseOptions
from resources.pack import ResourcePack
from transcode.json_format import JsonParser, read_json_document, write_json_document


def test_parse_queues_translations_for_resolved_module(tmp_path) -> None:
    """Bundles of resolvable modules should carry queued translations."""
    (tmp_path / "app_core" / "cartridge").mkdir(parents=True)
    document = {"app_core": {"account": {"title": {"default": "Account", "fr": "Compte"}}}}

    pack = JsonParser(ParseOptions(base_directory=tmp_path)).parse(
        document, ResourcePack(), EventChannel()
    )

    module = pack.get_module("app_core")
    bundle = module.get_bundle("account") if module is not None else None
    entry = bundle.get_entry("title") if bundle is not None else None
    assert entry is not None and (entry.get_translation("fr"), entry.get_source("fr")) == (
        "Compte",
        None,
    )


def test_parse_drops_invalid_locales_and_reports_bad_shapes(tmp_path) -> None:
    """Invalid locales and non-object bundles are reported and skipped."""
    (tmp_path / "app_core" / "cartridge").mkdir(parents=True)
    received: list[str] = []

    def _listener(event: str, payload: Mapping[str, object]) -> None:
        received.append(event)

    document = {
        "app_core": {
            "account": {"title": {"fr": "Compte", "French": "Compte"}},
            "broken": ["not", "an", "object"],
        },
    }

    pack = JsonParser(ParseOptions(base_directory=tmp_path)).parse(
        document, ResourcePack(), EventChannel().with_listener(_listener)
    )

    module = pack.get_module("app_core")
    bundle = module.get_bundle("account") if module is not None else None
    assert (
        bundle is not None
        and bundle.locales == ["fr"]
        and "unpack:invalid-locale" in received
        and "unpack:invalid-entry" in received
    )


def test_write_then_read_json_document(tmp_path) -> None:
    """Documents are written as UTF-8 JSON without ASCII escaping."""
    file_path = tmp_path / "out" / "pkg.json"

    write_json_document({"m": {"b": {"k": {"fr": "café"}}}}, file_path)

    assert "café" in file_path.read_text(encoding="utf-8") and read_json_document(file_path) == {
        "m": {"b": {"k": {"fr": "café"}}}
    }


def test_read_json_document_rejects_non_object(tmp_path) -> None:
    """A top-level JSON array is not a package."""
    file_path = tmp_path / "pkg.json"
    file_path.write_text(json.dumps(["m"]), encoding="utf-8")

    with pytest.raises(RespackArchiveError):
        read_json_document(file_path)


def test_read_json_document_rejects_invalid_syntax(tmp_path) -> None:
    """Malformed JSON raises an archive error."""
    file_path = tmp_path / "pkg.json"
    file_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(RespackArchiveError):
        read_json_document(file_path)
