# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
hide_my_HTML_ çözücü.

CimaNow izleme sayfası, sunucu listesini bir script değişkeni içinde saklar:

    hide_my_HTML_ = 'T0RjM01UZz0.ODc3MTk=' + "..." ;

Noktalarla ayrılmış her parça base64'tür; çözülen baytlardaki rakamlar
birleştirilip sabit bir ofset çıkarılınca tek bir karakterin kod noktası elde edilir.
"""

from __future__ import annotations
from pydantic   import BaseModel
from .Errors    import MalformedChunk, InvalidCodepoint
import base64, binascii, re

HIDE_MY_HTML_REGEX = re.compile(
    r"""hide_my_HTML_\s*=\s*((?:'[^']*'|"[^"]*")(?:\s*\+\s*(?:'[^']*'|"[^"]*"))*)\s*;""",
    re.DOTALL
)
QUOTED_REGEX = re.compile(r"""'([^']*)'|"([^"]*)\"""")
SERVER_REGEX = re.compile(r'<li[^>]+data-index="(\d+)"[^>]+data-id="(\d+)"[^>]*>([^<]+)</li>')

CODEPOINT_OFFSET = 87653
MAX_CODEPOINT    = 0x10FFFF
MAX_DIGITS       = len(str(MAX_CODEPOINT + CODEPOINT_OFFSET))


class ServerDescriptor(BaseModel):
    """Çözülen HTML içindeki tek bir <li> sunucu kaydı."""
    index : int
    id    : int
    label : str

    @property
    def identity(self) -> tuple[int, int]:
        return self.index, self.id

    def switch_url(self, template: str) -> str:
        """`{index}` ve `{id}` yer tutucularını doldurur."""
        return template.format(index=self.index, id=self.id)


class HiddenPayload:
    @staticmethod
    def find_blob(page_text: str) -> str | None:
        """Tüm tırnaklı parçaları sırayla birleştirip tek bir blob döndürür."""
        match = HIDE_MY_HTML_REGEX.search(page_text)
        if not match:
            return None

        return "".join(tek or cift for tek, cift in QUOTED_REGEX.findall(match.group(1)))

    @staticmethod
    def decode_chunk(chunk: str) -> str:
        """
        Tek bir parçayı tek bir karaktere çevirir.

        Raises:
            MalformedChunk   : base64 hatası veya rakamsız içerik
            InvalidCodepoint : ofset sonrası değer Unicode aralığı dışında
        """
        try:
            raw = base64.b64decode(chunk + "=" * (-len(chunk) % 4), validate=True)
        except (binascii.Error, ValueError) as hata:
            raise MalformedChunk(f"base64 çözülemedi: {chunk!r}") from hata

        digits = "".join(chr(byte) for byte in raw if 0x30 <= byte <= 0x39)
        if not digits:
            raise MalformedChunk(f"Rakam bulunamadı: {chunk!r}")

        # Baştaki sıfırlar değeri değiştirmez; daha uzun değer zaten aralık dışıdır
        digits = digits.lstrip("0") or "0"
        if len(digits) > MAX_DIGITS:
            raise InvalidCodepoint(f"Geçersiz kod noktası: {len(digits)} haneli değer")

        codepoint = int(digits) - CODEPOINT_OFFSET
        if not 0 <= codepoint <= MAX_CODEPOINT:
            raise InvalidCodepoint(f"Geçersiz kod noktası: {codepoint}")

        return chr(codepoint)

    @staticmethod
    def decode_blob(blob: str) -> str:
        """Parçaları sırasıyla çözer; bozuk parçalar sessizce atlanır."""
        decoded = []
        for chunk in blob.split("."):
            if not chunk:
                continue

            try:
                decoded.append(HiddenPayload.decode_chunk(chunk))
            except (MalformedChunk, InvalidCodepoint):
                continue

        return "".join(decoded)

    @staticmethod
    def decode(page_text: str) -> str | None:
        """
        Sayfa metnindeki gizli HTML'i çözer.

        Returns:
            Çözülen HTML, hiçbir parça kullanılamazsa boş string,
            hide_my_HTML_ ataması yoksa None
        """
        blob = HiddenPayload.find_blob(page_text)
        if blob is None:
            return None

        return HiddenPayload.decode_blob(blob)

    @staticmethod
    def servers(markup: str) -> list[ServerDescriptor]:
        """Çözülen HTML'den (index, id, label) sunucu kayıtlarını çıkarır."""
        return [
            ServerDescriptor(index=int(index), id=int(_id), label=label.strip())
                for index, _id, label in SERVER_REGEX.findall(markup)
        ]
