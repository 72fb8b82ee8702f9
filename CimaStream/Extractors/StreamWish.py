# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.Core import PackedJSExtractor, ExtractResult, M3U8_FILE_REGEX

class StreamWish(PackedJSExtractor):
    name        = "StreamWish"
    main_url    = "https://streamwish.to"
    url_pattern = M3U8_FILE_REGEX

    supported_domains = [
        "streamwish.to", "streamwish.site", "streamwish.com", "embedwish.com",
        "wishembed.pro", "wishfast.top", "sfastwish.com", "strwish.com",
        "flaswish.com", "awish.pro", "obeywish.com", "jodwish.com",
        "swdyu.com", "wishonly.site", "playerwish.com", "hlswish.com",
    ]

    def resolve_embed_url(self, url: str) -> str:
        # /f/ ve /e/ yolları aynı sayfaya düşer
        for part in ("/f/", "/e/"):
            if part in url:
                return url.replace(part, "/")
        return url

    async def extract(self, url: str, referer: str = None) -> ExtractResult:
        base_url = self.get_base_url(url)
        istek    = await self.httpx.get(
            url     = self.resolve_embed_url(url),
            headers = {
                "Accept"  : "*/*",
                "Referer" : f"{base_url}/",
                "Origin"  : f"{base_url}/",
            }
        )

        m3u8_url = self.unpack_and_find(istek.text)
        if not m3u8_url:
            raise ValueError(f"{self.name}: m3u8 bulunamadı. {url}")

        return ExtractResult(
            name       = self.name,
            url        = self.fix_url(m3u8_url),
            referer    = f"{base_url}/",
            user_agent = self.httpx.headers.get("User-Agent", "")
        )
