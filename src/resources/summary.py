"""Read-only summaries folded from the resource tree."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class ModuleSummary:
    """Counts for one module.

    Attributes:
        bundle_count: Number of bundles.
        resource_count: Number of entries across bundles.
        locales: Union of bundle locales, first-seen order.
    """

    bundle_count: int = 0
    resource_count: int = 0
    locales: tuple[str, ...] = ()


@dataclass(frozen=True)
class PackSummary:
    """Counts for a whole resource pack.

    Attributes:
        modules: Number of modules.
        bundles: Number of bundles across modules.
        locales: Union of module locales, first-seen order.
        resources: Number of entries across modules.
        details: Per-module summaries keyed by module name.
    """

    modules: int = 0
    bundles: int = 0
    locales: tuple[str, ...] = ()
    resources: int = 0
    details: Mapping[str, ModuleSummary] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        payload = asdict(self)
        payload["locales"] = list(self.locales)
        payload["details"] = {
            name: {**asdict(detail), "locales": list(detail.locales)}
            for name, detail in self.details.items()
        }
        return payload


def merge_locales(known: tuple[str, ...], extra: list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Append unseen locales from ``extra`` to ``known``."""
    merged = list(known)
    for locale in extra:
        if locale not in merged:
            merged.append(locale)
    return tuple(merged)
