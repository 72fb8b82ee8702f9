# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.Core import PackedJSExtractor, ExtractResult, HTMLHelper, Packer, PACKED_REGEX, find_all_stream_urls
import re

class VidHide(PackedJSExtractor):
    name     = "VidHide"
    main_url = "https://vidhidepro.com"

    supported_domains = [
        "vidhidepro.com", "vidhide.com", "vidhidevip.com", "vidhideplus.com",
        "vidhidepre.com", "movearnpre.com", "filelions.live", "filelions.online",
        "filelions.to", "smoothpre.com", "dhtpre.com",
    ]

    def get_embed_url(self, url: str) -> str:
        for part in ("/d/", "/download/", "/file/", "/embed/", "/f/"):
            if part in url:
                return url.replace(part, "/v/")
        return url

    async def extract(self, url: str, referer: str = None) -> ExtractResult | list[ExtractResult]:
        base_url = self.get_base_url(url)
        istek    = await self.httpx.get(
            url     = self.get_embed_url(url),
            headers = {
                "Sec-Fetch-Dest" : "empty",
                "Origin"         : f"{base_url}/",
                "Referer"        : referer or f"{base_url}/",
            }
        )
        text = istek.text

        if any(x in text for x in ("File is no longer available", "File Not Found")):
            raise ValueError(f"{self.name}: Video silinmiş. {url}")

        # Tüm kalite/sunucu m3u8'leri "links" objesinde
        content = text
        if packed := HTMLHelper(text).regex_first(PACKED_REGEX):
            content = Packer.unpack(packed) or text

        m3u8_urls = re.findall(r':\s*["\']([^"\']+\.m3u8[^"\']*)["\']', content) or find_all_stream_urls(content)
        if not m3u8_urls and (tek := self.unpack_and_find(text)):
            m3u8_urls = [tek]

        if not m3u8_urls:
            raise ValueError(f"{self.name}: Video URL bulunamadı. {url}")

        results = [
            ExtractResult(
                name       = self.name,
                url        = self.fix_url(m3u8_url),
                referer    = f"{base_url}/",
                user_agent = self.httpx.headers.get("User-Agent", "")
            )
                for m3u8_url in dict.fromkeys(m3u8_urls)
        ]

        return results[0] if len(results) == 1 else results
