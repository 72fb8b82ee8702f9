# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.CLI  import konsol
from CimaStream.Core import PluginBase, MainPageResult, SearchResult, MovieInfo, SeriesInfo, Episode, ExtractResult, HTMLHelper
import base64, binascii

class MyCima(PluginBase):
    name        = "MyCima"
    language    = "ar"
    main_url    = "https://mycima.pics"
    favicon     = f"https://www.google.com/s2/favicons?domain={main_url}&sz=64"
    description = "ماي سيما - أفلام ومسلسلات وأنمي مترجمة اون لاين."

    main_page   = {
        f"{main_url}"           : "الرئيسية",
        f"{main_url}/movies/"   : "الأفلام",
        f"{main_url}/series/"   : "المسلسلات",
        f"{main_url}/top-imdb/" : "الأعلى تقييماً",
    }

    _episodes_ajax = "/wp-content/themes/mycima/Ajaxt/Single/Episodes.php"

    def _parse_grid_item(self, veri) -> SearchResult | None:
        href = veri.select_attr("div.Thumb--GridItem a", "href")
        if not href:
            return None

        title = veri.select_text("div.Thumb--GridItem strong")
        if not title:
            return None

        return SearchResult(
            title  = title,
            url    = self.fix_url(href),
            poster = self.fix_url(HTMLHelper.image_from_style(veri.select_attr("span.BG--GridItem", "data-lazy-style"))) or None,
            type   = "movie" if "/film" in href or "فيلم" in title else "series",
            year   = HTMLHelper.get_int_from_text(veri.select_text("span.year")),
        )

    async def get_main_page(self, page: int, url: str, category: str) -> list[MainPageResult]:
        hedef  = f"{url.rstrip('/')}/page/{page}/" if page > 1 else url
        istek  = await self.httpx.get(hedef)
        secici = HTMLHelper(istek.text)

        return [
            MainPageResult(category=category, **item.model_dump(exclude={"year"}))
                for veri in secici.select("div.Grid--WecimaPosts div.GridItem")
                    if (item := self._parse_grid_item(veri))
        ]

    async def search(self, query: str) -> list[SearchResult]:
        istek  = await self.httpx.get(f"{self.main_url}/filtering/", params={"keywords": query})
        secici = HTMLHelper(istek.text)

        return [item for veri in secici.select("div.GridItem") if (item := self._parse_grid_item(veri))]

    async def _load_season(self, url: str, post_id: str, season_id: str, season_no: int) -> list[Episode]:
        istek = await self.httpx.post(
            url     = f"{self.main_url}{self._episodes_ajax}",
            data    = {"season": season_id, "post_id": post_id},
            headers = {"X-Requested-With": "XMLHttpRequest", "Referer": url},
        )

        episodes = []
        for sira, ep in enumerate(HTMLHelper(istek.text).select("a"), start=1):
            ep_title = ep.select_text(".EpisodeTitle") or f"حلقة {sira}"
            episodes.append(Episode(
                season  = season_no,
                episode = HTMLHelper.get_int_from_text(ep_title) or sira,
                title   = ep_title,
                url     = self.fix_url(ep.select_attr(None, "href")),
            ))

        return episodes

    async def load_item(self, url: str) -> MovieInfo | SeriesInfo:
        istek  = await self.httpx.get(url)
        secici = HTMLHelper(istek.text)

        title_el = secici.select_first("div.Title--Content--Single-begin h1")
        poster   = HTMLHelper.image_from_style(secici.select_attr("div.Poster--Single-begin span.BG--Poster--Single-begin", "data-lazy-style"))

        common_info = {
            "url"         : url,
            "poster"      : self.fix_url(poster),
            "title"       : title_el.own_text() if title_el else None,
            "description" : secici.select_text("div.StoryMovieContent"),
            "year"        : secici.select_text("div.Title--Content--Single-begin h1 a"),
        }

        post_id = next((pid for script in secici.script_texts() if (pid := secici.regex_first(r"post_id:\s*'(\d+)'", script))), None)

        is_movie = not secici.select("div.SeasonsList") and "/series/" not in url
        if is_movie or not post_id:
            return MovieInfo(**common_info)

        async def _guarded(index: int, link) -> list[Episode]:
            season_name = link.text(strip=True)
            try:
                return await self._load_season(
                    url       = url,
                    post_id   = post_id,
                    season_id = link.attrs.get("data-season"),
                    season_no = HTMLHelper.get_int_from_text(season_name) or index,
                )
            except Exception as hata:
                konsol.log(f"[red][!] {self.name} » Sezon yüklenemedi ({season_name}): {hata}")
                return []

        seasons  = secici.select("div.SeasonsList ul li a[data-season]")
        episodes = []
        for group in await self.gather_with_limit([_guarded(i, link) for i, link in enumerate(seasons, start=1)]):
            episodes.extend(group)

        if not episodes:
            return MovieInfo(**common_info)

        return SeriesInfo(**common_info, episodes=episodes)

    @staticmethod
    def decode_play_url(encoded: str) -> str | None:
        """`.../play/<base64>/` biçimindeki izleme adresinin gerçek hedefini çözer."""
        if "/play/" not in encoded:
            return None

        payload = encoded.split("/play/", 1)[1].rstrip("/")
        payload = payload + "=" * (-len(payload) % 4)
        try:
            return base64.b64decode(payload, validate=True).decode("utf-8") or None
        except (binascii.Error, UnicodeDecodeError):
            return None

    async def _load_watch(self, encoded: str, referer: str) -> ExtractResult | list[ExtractResult] | None:
        decoded = self.decode_play_url(encoded)
        if not decoded:
            konsol.log(f"[yellow][~] {self.name} » /play/ bağlantısı çözülemedi: {encoded}")
            return None

        istek  = await self.httpx.get(decoded, headers={"Referer": referer})
        iframe = HTMLHelper(istek.text).select_attr("iframe", "src")
        if not iframe:
            return None

        return await self.extract(self.fix_url(iframe), referer=decoded)

    async def load_links(self, url: str) -> list[ExtractResult]:
        istek  = await self.httpx.get(url)
        secici = HTMLHelper(istek.text)

        encoded = list(dict.fromkeys(secici.select_attrs("ul#watch li", "data-watch")))

        results = []
        for data in await self.gather_with_timeout([self._load_watch(e, url) for e in encoded], timeout=10):
            self.collect_results(results, data)

        for link in secici.select("div#downloads a"):
            href  = link.attrs.get("href")
            label = link.text(strip=True)
            if not href:
                continue

            quality = HTMLHelper.get_int_from_text(label)
            results.append(self.direct_link(href, name=f"{label} Download", quality=f"{quality}p" if quality else None))

        return self.deduplicate(results)
