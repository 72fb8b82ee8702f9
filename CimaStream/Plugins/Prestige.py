# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.CLI  import konsol
from CimaStream.Core import PluginBase, MainPageResult, SearchResult, MovieInfo, SeriesInfo, Episode, ExtractResult, HTMLHelper, Packer, find_all_stream_urls

class Prestige(PluginBase):
    name        = "Prestige"
    language    = "ar"
    main_url    = "https://hp.brstej.com"
    favicon     = f"https://www.google.com/s2/favicons?domain={main_url}&sz=64"
    description = "ماك برستيج - مسلسلات عربية وخليجية ومصرية وشامية."

    main_page   = {
        f"{main_url}/home46"                            : "الرئيسية",
        f"{main_url}/category.php?cat=movies2-2224"     : "افلام",
        f"{main_url}/category818.php?cat=prss7-2025"    : "مسلسلات برستيج",
        f"{main_url}/category.php?cat=arab8-2025"       : "مسلسلات عربية",
        f"{main_url}/category.php?cat=eg8-2025"         : "مسلسلات مصرية",
        f"{main_url}/category.php?cat=syy5-2025"        : "مسلسلات شامية",
        f"{main_url}/category.php?cat=5a7-2024"         : "مسلسلات خليجية",
        f"{main_url}/new-videos.php"                    : "جديد الحلقات",
    }

    _items = "ul.pm-ul-browse-videos li, li.col-xs-6, li.col-md-3"

    def _parse_item(self, veri, default_type: str | None = None) -> SearchResult | None:
        link = veri.select_first("h3 a.ellipsis, h3 a, a.ellipsis")
        if not link:
            return None

        href  = self.fix_url(link.attrs.get("href"))
        title = link.attrs.get("title") or link.text(strip=True)
        if not href or not title:
            return None

        return SearchResult(
            title  = title,
            url    = href,
            poster = self.fix_url(veri.select_attr("div.pm-video-thumb img, div.thumbnail img, img", "src")) or None,
            type   = default_type or ("movie" if "movie" in href else "series"),
        )

    async def get_main_page(self, page: int, url: str, category: str) -> list[MainPageResult]:
        hedef  = f"{url}&page={page}" if page > 1 and "home46" not in url else url
        istek  = await self.httpx.get(hedef)
        secici = HTMLHelper(istek.text)

        return [
            MainPageResult(category=category, **item.model_dump(exclude={"year"}))
                for veri in secici.select(self._items)
                    if (item := self._parse_item(veri))
        ]

    async def search(self, query: str) -> list[SearchResult]:
        istek  = await self.httpx.get(f"{self.main_url}/search.php", params={"keywords": query})
        secici = HTMLHelper(istek.text)

        return [item for veri in secici.select(f"{self._items}, .search-results li") if (item := self._parse_item(veri, "series"))]

    async def load_item(self, url: str) -> MovieInfo | SeriesInfo:
        istek  = await self.httpx.get(url)
        secici = HTMLHelper(istek.text)

        title = secici.select_text("h1, .video-title, .watch-title") or secici.select_text("title").split(" – ")[0]

        common_info = {
            "url"         : url,
            "poster"      : secici.meta_content("og:image") or self.fix_url(secici.select_attr("div.pm-video-thumb img, .poster img, .thumbnail img, img.img-responsive", "src")),
            "title"       : title,
            "description" : secici.meta_content("og:description") or secici.select_text(".description, .story, .plot"),
        }

        episodes = []
        for link in secici.select("ul.pm-ul-browse-videos li a.ellipsis, .episodes-list a, a[href*='watch.php'], a[href*='play.php']"):
            ep_href  = self.fix_url(link.attrs.get("href"))
            ep_title = link.attrs.get("title") or link.text(strip=True)
            if ("watch.php" in ep_href or "play.php" in ep_href) and ep_title:
                episodes.append(Episode(episode=HTMLHelper.get_int_from_text(ep_title), title=ep_title, url=ep_href))

        # view-serie.php / series.php sayfaları
        if "serie" in url:
            for link in secici.select("li div.thumbnail a.ellipsis, li h3 a"):
                ep_href  = self.fix_url(link.attrs.get("href"))
                ep_title = link.attrs.get("title") or link.text(strip=True)
                if ep_href and ep_title:
                    _, episode = HTMLHelper.extract_season_episode(ep_title)
                    episodes.append(Episode(episode=episode or HTMLHelper.get_int_from_text(ep_title), title=ep_title, url=ep_href))

        if not episodes:
            return MovieInfo(**common_info)

        return SeriesInfo(**common_info, episodes=episodes)

    async def _play_url(self, url: str) -> str:
        if "play.php" in url:
            return url

        if "watch.php" in url:
            return url.replace("watch.php", "play.php")

        istek  = await self.httpx.get(url)
        secici = HTMLHelper(istek.text)
        return self.fix_url(secici.select_attr("a[href*='play.php'], a[href*='watch.php'], .play-btn, .watch-btn", "href")) or url

    async def load_links(self, url: str) -> list[ExtractResult]:
        play_url = await self._play_url(url)
        istek    = await self.httpx.get(play_url, headers={"Referer": url})
        secici   = HTMLHelper(istek.text)

        embeds = [
            self.fix_url(e)
                for e in secici.select_attrs("button.watchButton[data-embed-url], button[data-embed-url], .server-btn[data-embed-url]", "data-embed-url")
                    if e.strip()
        ]
        embeds += [src for src in (self.fix_url(s) for s in secici.select_attrs("iframe[src]", "src")) if src and not self.is_blocked_embed(src)]
        embeds  = list(dict.fromkeys(embeds))
        konsol.log(f"[yellow][~] {self.name} » {len(embeds)} sunucu » {play_url}")

        results = []
        for data in await self.gather_with_limit([self.extract(embed, referer=play_url) for embed in embeds]):
            self.collect_results(results, data)

        # Oynatıcı script'lerinde doğrudan bağlantılar
        for script in secici.script_texts():
            videolar = find_all_stream_urls(Packer.unpack(script)) + find_all_stream_urls(script)
            for video in dict.fromkeys(videolar):
                etiket = "HLS" if ".m3u8" in video else "MP4"
                results.append(self.direct_link(video, name=f"{self.name} - {etiket}", referer=play_url))

        return self.deduplicate(results)
