# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.Core import PackedJSExtractor, ExtractResult, HTMLHelper, SOURCES_REGEX

class Filemoon(PackedJSExtractor):
    name        = "Filemoon"
    main_url    = "https://filemoon.to"
    url_pattern = SOURCES_REGEX

    supported_domains = [
        "filemoon.to",
        "filemoon.in",
        "filemoon.sx",
        "filemoon.nl",
        "filemoon.com",
        "kerapoxy.cc",
    ]

    _UA = "Mozilla/5.0 (X11; Linux x86_64; rv:137.0) Gecko/20100101 Firefox/137.0"

    async def extract(self, url: str, referer: str = None) -> ExtractResult:
        self.httpx.headers.update({
            "Referer"        : referer or url,
            "Sec-Fetch-Dest" : "iframe",
            "User-Agent"     : self._UA,
        })

        istek = await self.httpx.get(url)

        # Asıl oynatıcı çoğu zaman bir iframe içinde
        if iframe_src := HTMLHelper(istek.text).select_attr("iframe", "src"):
            url   = self.fix_url(iframe_src)
            istek = await self.httpx.get(url)

        video_url = self.unpack_and_find(istek.text)
        if not video_url:
            raise ValueError(f"{self.name}: Video URL bulunamadı. {url}")

        return ExtractResult(
            name       = self.name,
            url        = self.fix_url(video_url),
            referer    = f"{self.get_base_url(url)}/",
            user_agent = self._UA,
        )
