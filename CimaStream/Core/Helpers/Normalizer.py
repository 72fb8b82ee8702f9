# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""Değer normalizasyonu: boş string → None, geçersiz yıl/rating → None."""

from __future__ import annotations
import re

_EMPTY_VALUES = ("n/a", "na", "غير معروف", "-")


def normalize_empty(value: str | None) -> str | None:
    """Boş string, 'N/A', 'غير معروف' gibi değerleri None'a çevirir."""
    if not isinstance(value, str):
        return value
    stripped = value.strip()
    if not stripped or stripped.casefold() in _EMPTY_VALUES:
        return None
    return stripped


def normalize_year(value: str | int | None) -> str | None:
    """Metindeki dört haneli yılı döndürür, yoksa None."""
    if value is None:
        return None
    m = re.search(r"\b(19\d{2}|20\d{2})\b", str(value))
    return m.group(1) if m else None
