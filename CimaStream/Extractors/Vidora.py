# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.Core import PackedJSExtractor, ExtractResult, HTMLHelper

class Vidora(PackedJSExtractor):
    name        = "Vidora"
    main_url    = "https://vidora.stream"
    url_pattern = r'file:\s*"(.*?m3u8.*?)"'

    supported_domains = ["vidora.stream", "vidora.su"]

    async def extract(self, url: str, referer: str = None) -> ExtractResult:
        headers = {
            "Referer"        : referer or self.main_url,
            "Sec-Fetch-Dest" : "iframe",
        }

        istek = await self.httpx.get(url.replace("/download/", "/e/"), headers=headers)

        if iframe_src := HTMLHelper(istek.text).select_attr("iframe", "src"):
            istek = await self.httpx.get(self.fix_url(iframe_src), headers=headers)

        m3u8_url = self.unpack_and_find(istek.text)
        if not m3u8_url:
            raise ValueError(f"{self.name}: Video URL bulunamadı. {url}")

        return ExtractResult(
            name    = self.name,
            url     = self.fix_url(m3u8_url),
            referer = f"{self.main_url}/"
        )
