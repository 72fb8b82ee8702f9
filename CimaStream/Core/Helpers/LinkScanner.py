# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""Metin içinden .m3u8 / .mp4 bağlantısı ayıklayıcı."""

from __future__ import annotations
import re

# Öncelik sırasına göre; ilk eşleşen desen kazanır
STREAM_PATTERNS = (
    re.compile(r"""(?<![\w-])(?:file|src|source)\s*[:=]\s*['"]([^'"]+\.(?:m3u8|mp4)[^'"]*)['"]"""),
    re.compile(r"""['"]([^'"]+\.(?:m3u8|mp4)[^'"]*)['"]"""),
    re.compile(r"""(https?://[^\s'"]+\.(?:m3u8|mp4)[^\s'"]*)"""),
)

QUOTED_HTTP_REGEX = re.compile(r"""['"](https?://[^'"]*\.(?:m3u8|mp4)[^'"]*)['"]""")


def find_stream_url(text: str | None) -> str | None:
    """Metindeki ilk oynatılabilir bağlantıyı döndürür, yoksa None."""
    if not text:
        return None

    for pattern in STREAM_PATTERNS:
        if match := pattern.search(text):
            url = match.group(1)
            if url.strip() and (".m3u8" in url or ".mp4" in url):
                return url

    return None


def find_all_stream_urls(text: str | None) -> list[str]:
    """Tırnak içindeki tüm http(s) .m3u8 / .mp4 bağlantıları, sırası korunarak ve tekrarsız."""
    if not text:
        return []

    return list(dict.fromkeys(QUOTED_HTTP_REGEX.findall(text)))


def is_segmented(url: str | None) -> bool:
    return ".m3u8" in (url or "").lower()
