# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.CLI  import konsol
from CimaStream.Core import PluginBase, MainPageResult, SearchResult, MovieInfo, SeriesInfo, Episode, ExtractResult, HTMLHelper

class CimaClub(PluginBase):
    name        = "CimaClub"
    language    = "ar"
    main_url    = "https://ciimaclub.club"
    favicon     = f"https://www.google.com/s2/favicons?domain={main_url}&sz=64"
    description = "سيما كلوب - مشاهدة وتحميل أحدث الأفلام والمسلسلات المترجمة."

    main_page   = {
        f"{main_url}"          : "المضاف حديثاً",
        f"{main_url}/#slider"  : "المميزة",
    }

    @staticmethod
    def _is_series(url: str) -> bool:
        return "/series/" in url or "/مسلسل-" in url

    async def get_main_page(self, page: int, url: str, category: str) -> list[MainPageResult]:
        # Site tek sayfalık bir ana sayfa sunuyor
        if page > 1:
            return []

        istek  = await self.httpx.get(self.main_url)
        secici = HTMLHelper(istek.text)

        results = []
        if url.endswith("#slider"):
            for veri in secici.select("div.Slider--Outer li.Slides--Item div.Block--Item"):
                title = veri.select_text("h3")
                href  = veri.select_attr("a", "href")
                if title and href:
                    results.append(MainPageResult(
                        category = category,
                        title    = title,
                        url      = self.fix_url(href),
                        poster   = self.fix_url(veri.select_poster("img")),
                        type     = "series" if self._is_series(href) else "movie",
                    ))
        else:
            for item in self._parse_boxes(secici.select("div.holdposts div.BlocksHolder > div.Small--Box")):
                results.append(MainPageResult(category=category, **item.model_dump(exclude={"year"})))

        return results

    def _parse_boxes(self, boxes) -> list[SearchResult]:
        results = []
        for veri in boxes:
            title = veri.select_text(".inner--title > h2") or veri.select_text("h2")
            href  = veri.select_attr("a", "href")
            if not title or not href:
                continue

            results.append(SearchResult(
                title  = title,
                url    = self.fix_url(href),
                poster = self.fix_url(veri.select_poster("img")),
                type   = "series" if veri.has_class("ser") or self._is_series(href) else "movie",
            ))

        return results

    async def search(self, query: str) -> list[SearchResult]:
        istek  = await self.httpx.get(f"{self.main_url}/", params={"s": query})
        secici = HTMLHelper(istek.text)

        return self._parse_boxes(secici.select("div.BlocksHolder > div.Small--Box"))

    def _parse_episodes(self, secici: HTMLHelper, season: int | None) -> list[Episode]:
        episodes = []
        for ep in secici.select("section.allepcont .row a"):
            # .epnum içinde "الحلقة" etiketi ayrı bir span'de, sayı kendi metninde
            epnum = ep.select_first(".epnum")
            episodes.append(Episode(
                season  = season,
                episode = HTMLHelper.get_int_from_text(epnum.own_text() if epnum else None),
                title   = ep.select_text(".ep-info h2"),
                url     = self.fix_url(ep.select_attr(None, "href")),
            ))

        return episodes

    async def load_item(self, url: str) -> MovieInfo | SeriesInfo:
        istek  = await self.httpx.get(url)
        secici = HTMLHelper(istek.text)

        title = secici.select_text("h1.PostTitle")
        if not title:
            raise ValueError(f"{self.name}: Başlık bulunamadı. {url}")

        content_rating = None
        for li in secici.select(".half-tags li"):
            if "التصنيف العمرى" in li.select_text("span"):
                content_rating = li.select_text("a")
                break

        common_info = {
            "url"            : url,
            "poster"         : self.fix_url(secici.select_attr(".MainSingle .left .image img", "src")),
            "title"          : title,
            "description"    : secici.select_text(".StoryArea p").replace("قصة العرض", "").strip(),
            "tags"           : secici.select_texts(".TaxContent a[href*='/genre/']"),
            "year"           : secici.select_text(".TaxContent a[href*='/release-year/']"),
            "content_rating" : content_rating,
        }

        is_series = self._is_series(url) or len(secici.select("section.allepcont .row a")) > 1
        if not is_series:
            return MovieInfo(**common_info)

        seasons = secici.select("section.allseasonss .Small--Box a")
        if not seasons:
            return SeriesInfo(**common_info, episodes=self._parse_episodes(secici, None))

        async def _season(link) -> list[Episode]:
            season_url  = self.fix_url(link.select_attr(None, "href"))
            season_no   = HTMLHelper.get_int_from_text(link.select_text(".epnum"))
            season_html = secici if season_url == url else HTMLHelper((await self.httpx.get(season_url)).text)
            return self._parse_episodes(season_html, season_no)

        episodes = []
        for group in await self.gather_with_limit([_season(link) for link in seasons]):
            episodes.extend(group)

        return SeriesInfo(**common_info, episodes=episodes)

    async def load_links(self, url: str) -> list[ExtractResult]:
        watch_url = url if url.rstrip("/").endswith("/watch") else f"{url.rstrip('/')}/watch/"
        istek     = await self.httpx.get(watch_url)
        secici    = HTMLHelper(istek.text)

        # İzleme sunucuları (embed)
        embeds = list(dict.fromkeys(self.fix_url(e) for e in secici.select_attrs("ul#watch li", "data-watch") if e.strip()))
        konsol.log(f"[yellow][~] {self.name} » {len(embeds)} embed sunucusu")

        results = []
        for data in await self.gather_with_limit([self.extract(embed, referer=watch_url) for embed in embeds]):
            self.collect_results(results, data)

        # Doğrudan indirme bağlantıları
        for link in secici.select(".ServersList.Download a"):
            href = (link.select_attr(None, "href") or "").strip()
            if not href:
                continue

            label = link.select_text(".text span") or "رابط تحميل"
            results.append(self.direct_link(href, name=f"{label} - مباشر", referer=watch_url))

        return self.deduplicate(results)
