"""Single resource key with its per-locale translations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, TypeVar

from properties.property import Property

_DefaultT = TypeVar("_DefaultT")


@dataclass(frozen=True)
class Translation:
    """Text for one locale.

    Attributes:
        text: Translation text, possibly empty.
        source: Property the text was read from; ``None`` for queued text
            waiting to be written.
    """

    text: str
    source: Property | None = None

    @property
    def is_pending(self) -> bool:
        """Return whether the text still has to be persisted."""
        return self.source is None


class BundleEntry:
    """One resource key and all its translations."""

    def __init__(
        self,
        key: str,
        locale: str | None = None,
        source: Property | None = None,
    ) -> None:
        self.key = key
        self._translations: dict[str, Translation] = {}
        if locale is not None and source is not None:
            self.register_translation(locale, source)

    def register_translation(
        self, locale: str, source: Property, text: str | None = None
    ) -> None:
        """Record a translation read from a source file; last call wins."""
        self._translations[locale] = Translation(
            text=source.value if text is None else text, source=source
        )

    def queue_translation(self, locale: str, text: str) -> None:
        """Record a translation waiting to be written to its source file."""
        self._translations[locale] = Translation(text=text)

    def get_translation(
        self, locale: str, default: _DefaultT | None = None
    ) -> str | _DefaultT | None:
        """Return the text for ``locale``, or ``default`` when absent."""
        translation = self._translations.get(locale)
        if translation is None:
            return default
        return translation.text

    def get_source(self, locale: str) -> Property | None:
        """Return the source property for ``locale`` when read from a file."""
        translation = self._translations.get(locale)
        return translation.source if translation is not None else None

    def has_all_locales(self, locales: Iterable[str]) -> bool:
        """Return whether every locale in ``locales`` has a recorded translation."""
        return all(locale in self._translations for locale in locales)

    @property
    def locales(self) -> list[str]:
        """Locales with a recorded translation, in registration order."""
        return list(self._translations)

    def __repr__(self) -> str:
        return f"BundleEntry(key={self.key!r}, locales={self.locales!r})"
