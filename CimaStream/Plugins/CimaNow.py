# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.CLI   import konsol
from CimaStream.Core  import PluginBase, MainPageResult, SearchResult, MovieInfo, SeriesInfo, Episode, ExtractResult, HTMLHelper, HiddenPayload, ServerDescriptor
from urllib.parse     import urlparse
import re

class CimaNow(PluginBase):
    name        = "CimaNow"
    language    = "ar"
    main_url    = "https://cimanow.cc"
    favicon     = f"https://www.google.com/s2/favicons?domain={main_url}&sz=64"
    description = "سيما ناو - مشاهدة الأفلام والمسلسلات العربية والأجنبية والتركية والهندية اون لاين."

    main_page   = {
        f"{main_url}"                            : "الرئيسية",
        f"{main_url}/category/الافلام/"          : "الأفلام",
        f"{main_url}/category/المسلسلات/"        : "المسلسلات",
        f"{main_url}/category/افلام-اجنبية/"     : "أفلام أجنبية",
        f"{main_url}/category/مسلسلات-اجنبية/"   : "مسلسلات أجنبية",
        f"{main_url}/category/افلام-عربية/"      : "أفلام عربية",
        f"{main_url}/category/مسلسلات-عربية/"    : "مسلسلات عربية",
        f"{main_url}/category/افلام-هندية/"      : "أفلام هندية",
        f"{main_url}/category/افلام-تركية/"      : "أفلام تركية",
        f"{main_url}/category/مسلسلات-تركية/"    : "مسلسلات تركية",
    }

    # Sunucu değiştirme isteği başına süre sınırı (saniye)
    switch_timeout = 5

    _UA           = "Mozilla/5.0 (Linux; Android) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/115 Mobile Safari/537.36"
    _watch_ref    = "https://rm.freex2line.online/2020/02/blog-post.html/"
    _movie_regex  = re.compile(r"فيلم|مسرحية|حفلات")
    _player_regex = r"\[(\d+p)]\s+(/uploads/[^\"]+\.mp4)"

    @property
    def switch_template(self) -> str:
        return f"{self.main_url}/wp-content/themes/Cima%20Now%20New/core.php?action=switch&index={{index}}&id={{id}}"

    def _parse_card(self, veri) -> SearchResult | None:
        href = self.fix_url(veri.select_attr(None, "href"))
        if not href or "javascript" in href:
            return None

        title_el = veri.select_first("li[aria-label='title']")
        title    = title_el.own_text() if title_el else ""
        if not title:
            return None

        ribbons = veri.select_texts("li[aria-label='ribbon']")
        if any("مدبلج" in ribbon for ribbon in ribbons[:2]):
            title = f"{title} (مدبلج)"

        if season := next((ribbon for ribbon in ribbons if "الموسم" in ribbon), None):
            title = f"{title} {season}"

        return SearchResult(
            title  = title,
            url    = href,
            poster = self.fix_url(veri.select_attr("img", "data-src")) or None,
            type   = "movie" if self._movie_regex.search(href) else "series",
            year   = HTMLHelper.get_int_from_text(veri.select_text("li[aria-label='year']")),
        )

    async def get_main_page(self, page: int, url: str, category: str) -> list[MainPageResult]:
        is_home = url.rstrip("/") == self.main_url
        if is_home and page > 1:
            return []

        hedef  = f"{self.main_url}/home" if is_home else f"{url.rstrip('/')}/page/{page}/"
        istek  = await self.httpx.get(hedef, headers={"User-Agent": "MONKE"})
        secici = HTMLHelper(istek.text)

        kartlar = secici.select(".owl-body a") if is_home else secici.select("section[aria-label='posts'] article a")

        results = []
        for kart in kartlar:
            if item := self._parse_card(kart):
                results.append(MainPageResult(category=category, **item.model_dump(include={"title", "url", "poster", "type"})))

        return results

    async def search(self, query: str) -> list[SearchResult]:
        istek  = await self.httpx.get(f"{self.main_url}/", params={"s": query})
        secici = HTMLHelper(istek.text)

        return [item for veri in secici.select("section article[aria-label='post'] a") if (item := self._parse_card(veri))]

    def _parse_episodes(self, secici: HTMLHelper, season: int | None) -> list[Episode]:
        return [
            Episode(
                season  = season,
                episode = HTMLHelper.get_int_from_text(ep.select_text("em")),
                title   = ep.select_attr("img:nth-child(2)", "alt"),
                url     = self.fix_url(ep.select_attr(None, "href")),
            )
                for ep in secici.select("ul#eps li a")
        ]

    async def load_item(self, url: str) -> MovieInfo | SeriesInfo:
        istek  = await self.httpx.get(url)
        secici = HTMLHelper(istek.text)

        title       = secici.select_text("title").split(" | ")[0]
        poster      = secici.meta_content("og:image")
        description = next((li.select_text("p") for li in secici.select("ul#details li") if "لمحة" in li.text()), None)
        tags_el     = secici.select_first("article ul")
        tags        = tags_el.select_texts("li") if tags_el else []
        years       = secici.select_texts("article ul:nth-child(1) li a")
        year        = years[-1] if years else None
        trailer     = secici.select_attr("iframe", "src")

        common_info = {
            "url"         : url,
            "poster"      : self.fix_url(poster),
            "title"       : title,
            "description" : description,
            "tags"        : tags,
            "year"        : year,
            "trailer"     : trailer,
        }

        if self._movie_regex.search(title):
            return MovieInfo(**common_info)

        episodes = []
        seasons  = [
            (self.fix_url(a.select_attr(None, "href")), HTMLHelper.get_int_from_text(a.text()))
                for a in secici.select("section[aria-label='seasons'] ul li a")
        ]

        if seasons:
            async def _season(season_url: str, season_no: int | None) -> list[Episode]:
                season_istek = await self.httpx.get(season_url)
                return self._parse_episodes(HTMLHelper(season_istek.text), season_no)

            for group in await self.gather_with_limit([_season(s_url, s_no) for s_url, s_no in seasons]):
                episodes.extend(group)
        else:
            season_no = HTMLHelper.get_int_from_text(secici.select_text("span[aria-label='season-title']"))
            episodes  = self._parse_episodes(secici, season_no)

        return SeriesInfo(**common_info, episodes=episodes)

    async def _load_player(self, iframe_url: str) -> list[ExtractResult]:
        """Sitenin kendi oynatıcısı: `[720p] /uploads/x.mp4` listesi."""
        istek    = await self.httpx.get(iframe_url, headers={"Referer": iframe_url, "User-Agent": "Mozilla/5.0"})
        parsed   = urlparse(iframe_url)
        base_url = f"{parsed.scheme}://{parsed.netloc}"

        results = []
        for quality, path in HTMLHelper(istek.text).regex_all(self._player_regex):
            konsol.log(f"[green][+] {self.name} » {quality} » {base_url}{path}")
            results.append(ExtractResult(
                name    = f"{self.name} {quality}",
                url     = f"{base_url}{path}",
                referer = iframe_url,
                quality = quality,
            ))

        return results

    async def _load_server(self, server: ServerDescriptor, seen: set[str]) -> ExtractResult | list[ExtractResult] | None:
        istek = await self.httpx.get(
            url     = server.switch_url(self.switch_template),
            headers = {"Referer": f"{self.main_url}/", "User-Agent": self._UA}
        )

        iframe_url = HTMLHelper(istek.text).regex_first(r'<iframe[^>]+src="([^"]+)"')
        if not iframe_url:
            konsol.log(f"[yellow][~] {self.name} » [{server.label}] iframe bulunamadı")
            return None

        iframe_url = self.fix_url(iframe_url)
        if iframe_url in seen:
            return None
        seen.add(iframe_url)

        if server.label.casefold() == "cima now":
            return await self._load_player(iframe_url)

        return await self.extract(iframe_url, referer=f"{self.main_url}/", prefix=server.label)

    async def load_links(self, url: str) -> list[ExtractResult]:
        watch_url = url if "/watching" in url else f"{url.rstrip('/')}/watching/"
        istek     = await self.httpx.get(watch_url, headers={"Referer": self._watch_ref, "User-Agent": self._UA})

        markup = HiddenPayload.decode(istek.text)
        if not markup:
            konsol.log(f"[red][!] {self.name} » hide_my_HTML_ çözülemedi: {watch_url}")
            return []

        # Aynı (index, id) ikilisi için tek istek
        servers = list({server.identity: server for server in HiddenPayload.servers(markup)}.values())
        konsol.log(f"[yellow][~] {self.name} » {len(servers)} sunucu bulundu")

        seen    = set()
        results = []
        for data in await self.gather_with_timeout([self._load_server(server, seen) for server in servers], timeout=self.switch_timeout):
            self.collect_results(results, data)

        return self.deduplicate(results)
