# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""Başlık temizleyici: مترجم / اون لاين vb. suffix'leri kaldırır."""

from __future__ import annotations
import re

_TITLE_SUFFIXES = [
    " مترجمة",
    " مترجم",
    " مدبلجة",
    " اون لاين",
    " أون لاين",
    " كامل",
    " كاملة",
    " HD",
]

_TITLE_PREFIXES = [
    "مشاهدة ",
    "فيلم ",
    "مسلسل ",
]


def clean_title(title: str | None) -> str | None:
    """Başlıktaki izleme / çeviri eklerini temizler ve boşlukları sadeleştirir."""
    if not title or not isinstance(title, str):
        return title

    cleaned = " ".join(title.split())
    if not cleaned:
        return None

    # "Film(2024)" → "Film (2024)"
    cleaned = re.sub(r"(\S)\(", r"\1 (", cleaned)

    for prefix in _TITLE_PREFIXES:
        if cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix):]

    for suffix in _TITLE_SUFFIXES:
        cleaned = re.sub(f"{re.escape(suffix)}(?=\\s|$)", "", cleaned).strip()

    return cleaned or None
