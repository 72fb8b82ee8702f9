# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.CLI  import konsol
from CimaStream.Core import PluginBase, MainPageResult, SearchResult, MovieInfo, SeriesInfo, Episode, ExtractResult, HTMLHelper
from httpx           import HTTPError

class CimaLight(PluginBase):
    name        = "CimaLight"
    language    = "ar"
    main_url    = "https://cimalite.cam"
    favicon     = f"https://www.google.com/s2/favicons?domain={main_url}&sz=64"
    description = "سيما لايت - أفلام ومسلسلات اون لاين."

    main_page   = {
        f"{main_url}/category/movies/" : "أفلام",
        f"{main_url}/category/series/" : "مسلسلات",
        f"{main_url}/views/"           : "الأكثر مشاهدة",
        f"{main_url}/recent/"          : "أحدث الإضافات",
    }

    _containers = ".owl-item, .box-item, article, .post, .item, li.post-item"
    _item_links = "a[href*='/movie/'], a[href*='/episode/'], a[href*='/season/'], a[href*='/series/']"

    def _parse_item(self, veri) -> SearchResult | None:
        link = veri.select_first(self._item_links) or veri.select_first("a[title]") or veri.select_first("a")
        if not link:
            return None

        href = (link.attrs.get("href") or "").strip()
        if not href or href == "#":
            return None

        title = link.attrs.get("title") or veri.select_text("h3, h2, .title, .name") or link.text(strip=True)
        if not title.strip():
            return None

        img    = veri.select_first("img")
        poster = (img.attrs.get("data-lazy-src") or img.attrs.get("data-src") or img.attrs.get("src")) if img else None

        return SearchResult(
            title  = title.strip(),
            url    = self.fix_url(href),
            poster = self.fix_url(poster) or None,
            type   = "series" if any(x in href for x in ("/series/", "/season/", "/episode/")) else "movie",
        )

    def _parse_listing(self, secici: HTMLHelper) -> list[SearchResult]:
        results = {}
        for veri in secici.select(self._containers):
            if (item := self._parse_item(veri)) and item.url not in results:
                results[item.url] = item

        return list(results.values())

    async def get_main_page(self, page: int, url: str, category: str) -> list[MainPageResult]:
        hedef = f"{url}page/{page}/" if page > 1 else url
        try:
            istek = await self.httpx.get(hedef)
        except HTTPError as hata:
            konsol.log(f"[red][!] {self.name} » Ana sayfa alınamadı: {hedef} » {hata}")
            return []

        return [
            MainPageResult(category=category, **item.model_dump(exclude={"year"}))
                for item in self._parse_listing(HTMLHelper(istek.text))
        ]

    async def search(self, query: str) -> list[SearchResult]:
        try:
            istek = await self.httpx.get(f"{self.main_url}/", params={"s": query})
        except HTTPError as hata:
            konsol.log(f"[red][!] {self.name} » Arama başarısız: {query} » {hata}")
            return []

        return self._parse_listing(HTMLHelper(istek.text))

    async def load_item(self, url: str) -> MovieInfo | SeriesInfo:
        istek  = await self.httpx.get(url)
        secici = HTMLHelper(istek.text)

        title = secici.select_text("h1, .entry-title, .post-title, title")
        img   = secici.select_first(".poster img, .thumbnail img, img.attachment-large")

        common_info = {
            "url"         : url,
            "poster"      : secici.meta_content("og:image") or (self.fix_url(img.attrs.get("data-lazy-src") or img.attrs.get("src")) if img else None),
            "title"       : title,
            "description" : secici.meta_content("og:description") or secici.select_text(".story, .description, .plot, .synopsis"),
        }

        if "/series/" not in url and "/season/" not in url:
            return MovieInfo(**common_info)

        episodes = []
        for link in secici.select("a[href*='/episode/']"):
            ep_href  = self.fix_url(link.attrs.get("href"))
            ep_title = (link.attrs.get("title") or link.text(strip=True)).strip()
            if not ep_href or not ep_title:
                continue

            season, episode = HTMLHelper.extract_season_episode(ep_title)
            episodes.append(Episode(
                season  = season,
                episode = episode or HTMLHelper.get_int_from_text(ep_title),
                title   = ep_title,
                url     = ep_href,
            ))

        if not episodes:
            return MovieInfo(**common_info)

        return SeriesInfo(**common_info, episodes=episodes)

    def _collect_embeds(self, secici: HTMLHelper, seen: set[str], with_iframes: bool = True) -> list[tuple[str, str]]:
        """(embed_url, sunucu_adı) listesi; daha önce görülen adresler atlanır."""
        embeds = []
        for server in secici.select("li[data-index]"):
            embed = self.fix_url(server.attrs.get("data-index"))
            if embed and embed not in seen:
                seen.add(embed)
                embeds.append((embed, server.text(strip=True) or "Server"))

        if with_iframes:
            for src in secici.select_attrs("iframe[src]", "src"):
                src = self.fix_url(src)
                if src and not self.is_blocked_embed(src) and src not in seen:
                    seen.add(src)
                    embeds.append((src, "Iframe"))

        return embeds

    async def _extract_all(self, embeds: list[tuple[str, str]], referer: str) -> list[ExtractResult]:
        results = []
        for embed, server_name in embeds:
            konsol.log(f"[yellow][~] {self.name} » {server_name} » {embed}")

        for data in await self.gather_with_limit([self.extract(embed, referer=referer) for embed, _ in embeds]):
            self.collect_results(results, data)

        return results

    async def load_links(self, url: str) -> list[ExtractResult]:
        watch_url = f"{url}watch/" if url.endswith("/") else f"{url}/watch/"
        seen      = set()

        try:
            istek  = await self.httpx.get(watch_url, headers={"Referer": url})
            secici = HTMLHelper(istek.text)
        except HTTPError as hata:
            # İzleme sayfası yoksa içerik sayfasının kendisi denenir
            konsol.log(f"[red][!] {self.name} » İzleme sayfası alınamadı: {watch_url} » {hata}")
            watch_url = url
            secici    = HTMLHelper((await self.httpx.get(url)).text)

        results = await self._extract_all(self._collect_embeds(secici, seen), referer=watch_url)

        if not results and watch_url != url:
            try:
                orijinal = HTMLHelper((await self.httpx.get(url)).text)
            except HTTPError as hata:
                konsol.log(f"[red][!] {self.name} » İçerik sayfası alınamadı: {url} » {hata}")
                return []

            results = await self._extract_all(self._collect_embeds(orijinal, seen, with_iframes=False), referer=url)

        return self.deduplicate(results)
