"""Country record displayed by the countries list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional


def language_code(locale: str) -> str:
    """Return the language part of a locale identifier such as ``fr_FR``."""

    return locale.replace("-", "_").split("_", 1)[0].lower()


@dataclass(frozen=True)
class Country:
    name: str
    translations: Mapping[str, Optional[str]] = field(default_factory=dict, compare=False)
    population: int = 0
    flag: Optional[str] = None
    alpha3_code: str = ""

    def localized_name(self, locale: str) -> str:
        """Return the name translated for *locale*, falling back to :attr:`name`."""

        translated = self.translations.get(language_code(locale))
        return translated or self.name


__all__ = ["Country", "language_code"]
