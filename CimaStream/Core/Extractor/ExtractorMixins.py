# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
Extractor'lar için ortak mixin'ler / base class'lar.

  - PackedJSExtractor : eval(function(p,a,c,k,e,d)) unpack (Filemoon, StreamWish, VidHide, Vidora)
"""

from .ExtractorBase import ExtractorBase
from ..Helpers      import HTMLHelper, Packer, PACKED_REGEX, find_stream_url


# ============================================
# Ortak Regex Sabitleri
# ============================================

SOURCES_REGEX   = r'sources\s*:\s*\[\s*\{\s*file\s*:\s*["\']([^"\']+)["\']'
M3U8_FILE_REGEX = r'file\s*:\s*["\']([^"\']+\.m3u8[^"\']*)["\']'


# ============================================
# PackedJSExtractor
# ============================================

class PackedJSExtractor(ExtractorBase):
    """
    eval(function(p,a,c,k,e,d)) packed JS içinden video URL'si çıkaran Extractor'lar için base class.

    Alt sınıflarda override edilebilecek alanlar:
        url_pattern : str | None: Unpack sonrası önce denenecek regex (None ise yalnızca find_stream_url)
    """

    url_pattern: str | None = None

    def find_in(self, text: str, pattern: str | None = None) -> str | None:
        target = pattern or self.url_pattern
        if target and (url := HTMLHelper(text).regex_first(target)):
            return url

        return find_stream_url(text)

    def unpack_and_find(self, html_text: str, pattern: str | None = None) -> str | None:
        """
        HTML içinden packed JS'yi bulup unpack eder ve video URL'sini çıkarır.
        Packed blok yoksa veya içinden URL çıkmazsa düz HTML'de arar.
        """
        packed = HTMLHelper(html_text).regex_first(PACKED_REGEX)
        if packed and (unpacked := Packer.unpack(packed)):
            if url := self.find_in(unpacked, pattern):
                return url

        return self.find_in(html_text, pattern)
