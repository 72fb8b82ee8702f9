# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.Core import ExtractorBase, ExtractResult, HTMLHelper, find_stream_url
import httpx

class Uqload(ExtractorBase):
    name     = "Uqload"
    main_url = "https://uqload.cx"

    supported_domains = ["uqload.com", "uqload.io", "uqload.cx", "uqload.to", "uqload.co"]

    async def extract(self, url: str, referer: str = None) -> ExtractResult:
        domain  = self.get_base_url(url)
        headers = {"Referer": referer or domain}

        try:
            istek = await self.httpx.get(url, headers=headers)
            istek.raise_for_status()
        except httpx.HTTPError:
            istek = await self.async_cf_get(url, headers=headers)

        secici    = HTMLHelper(istek.text)
        video_url = secici.regex_first(r'sources\s*:\s*\[\s*["\']([^"\']+)["\']') or find_stream_url(istek.text)

        if not video_url:
            raise ValueError(f"{self.name}: Video URL bulunamadı. {url}")

        return ExtractResult(
            name    = self.name,
            url     = video_url,
            referer = f"{domain}/"
        )
