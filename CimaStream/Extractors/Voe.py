# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.Core import ExtractorBase, ExtractResult, HTMLHelper, find_stream_url
import base64, binascii, json

class Voe(ExtractorBase):
    name     = "Voe"
    main_url = "https://voe.sx"

    supported_domains = ["voe.sx", "yip.su", "metagnathtuggers.com", "graceaddresscommunity.com", "sethniceletter.com"]

    def _decode_wc0(self, secici: HTMLHelper) -> str | None:
        """wc0 = '<base64 JSON>' içindeki file alanı."""
        encoded = secici.regex_first(r"wc0\s*=\s*'([^']+)'")
        if not encoded:
            return None

        try:
            return json.loads(base64.b64decode(encoded).decode()).get("file")
        except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError):
            return None

    async def extract(self, url: str, referer: str = None) -> ExtractResult:
        # Voe DDoS koruması kullanıyor, cloudscraper ile dene
        istek  = await self.async_cf_get(url, headers={"Referer": referer or self.main_url})
        secici = HTMLHelper(istek.text)

        video_url = (
            self._decode_wc0(secici)
            or secici.regex_first(r"sources\s*:\s*\[\s*\{\s*src\s*:\s*['\"]([^'\"]+)['\"]")
            or secici.regex_first(r"hls['\"]?\s*:\s*['\"]([^'\"]+)['\"]")
            or find_stream_url(istek.text)
        )

        if not video_url:
            raise ValueError(f"{self.name}: Video URL bulunamadı. {url}")

        return ExtractResult(
            name    = self.name,
            url     = video_url,
            referer = url
        )
