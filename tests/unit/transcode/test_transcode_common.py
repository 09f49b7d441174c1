"""Unit tests for helpers shared by every exchange format."""

from __future__ import annotations

from resources.entry import BundleEntry
from transcode.common import MemberPath, should_include, split_member_path


def test_should_include_keeps_everything_without_filter() -> None:
    """An empty filter includes every entry."""
    assert should_include(BundleEntry("k"), ())


def test_should_include_drops_entries_with_every_filter_locale() -> None:
    """Entries already holding every filter locale are dropped."""
    entry = BundleEntry("k")
    entry.queue_translation("en", "x")
    entry.queue_translation("fr", "")

    assert (should_include(entry, ("fr",)), should_include(entry, ("fr", "de"))) == (False, True)


def test_split_member_path_reads_last_two_segments() -> None:
    """Module and bundle come from the folder and file names."""
    assert split_member_path("pkg/app_core/account.csv", ".csv") == MemberPath(
        module="app_core", bundle="account"
    )


def test_split_member_path_rejects_unexpected_shapes() -> None:
    """Bare files and foreign extensions are not members."""
    assert (
        split_member_path("account.csv", ".csv"),
        split_member_path("pkg/app_core/account.txt", ".csv"),
    ) == (None, None)


def test_split_member_path_rejects_macos_archiver_metadata() -> None:
    """``__MACOSX`` folders and ``._`` sidecars are not bundles."""
    assert (
        split_member_path("__MACOSX/out/app_core/._account.csv", ".csv"),
        split_member_path("out/app_core/._account.csv", ".csv"),
        split_member_path("__MACOSX/out/app_core/account.csv", ".csv"),
    ) == (None, None, None)
