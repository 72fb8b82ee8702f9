# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.Core import ExtractorBase, ExtractResult, HTMLHelper

class StreamTape(ExtractorBase):
    name              = "StreamTape"
    main_url          = "https://streamtape.com"
    supported_domains = ["streamtape.com", "streamtape.to", "streamtape.net", "strtape.cloud", "strcloud.in"]

    async def extract(self, url: str, referer: str = None) -> ExtractResult:
        istek = await self.httpx.get(url, headers={"Referer": referer or self.main_url})

        # getElementById('robotlink').innerHTML = '//streamtape.com/get'+ ('xcd_video?id=...&token=...').substring(2).substring(1)
        match = HTMLHelper(istek.text).regex_first(
            r"getElementById\('robotlink'\)\.innerHTML\s*=\s*'([^']+)'\s*\+\s*\('([^']+)'\)",
            group=None,
        )
        if not match:
            raise ValueError(f"{self.name}: robotlink bulunamadı. {url}")

        base_part, token_part = match

        # .substring(2).substring(1) → [3:]
        video_url = f"https:{base_part}{token_part[3:]}"

        # get_video → gerçek mp4 adresine yönlendirir
        head = await self.httpx.head(video_url)

        return ExtractResult(
            name    = self.name,
            url     = str(head.url),
            referer = f"{self.main_url}/",
            is_m3u8 = False,
        )
