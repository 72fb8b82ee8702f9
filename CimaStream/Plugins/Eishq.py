# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.CLI  import konsol
from CimaStream.Core import PluginBase, MainPageResult, SearchResult, MovieInfo, SeriesInfo, Episode, ExtractResult, HTMLHelper, Packer, find_stream_url
from httpx           import HTTPError
import re

class Eishq(PluginBase):
    name        = "Eishq"
    language    = "ar"
    main_url    = "https://new.eishq.net"
    favicon     = f"https://www.google.com/s2/favicons?domain={main_url}&sz=64"
    description = "قصة عشق - مسلسلات تركية مترجمة وأفلام اون لاين."

    main_page   = {
        f"{main_url}/video/series/"                                                : "مسلسلات",
        f"{main_url}/%d8%a3%d8%ad%d8%af%d8%ab-%d8%a7%d9%84%d8%ad%d9%84%d9%82%d8%a7%d8%aa-2/" : "أحدث الحلقات",
        f"{main_url}/video/movies/"                                                : "أفلام",
    }

    _containers  = "article, .post-item, .video-item"
    _embed_attrs = ("data-src", "data-embed", "data-url", "data-video")

    def _parse_card(self, veri) -> SearchResult | None:
        link = veri.select_first("a[href*='/video/']")
        if not link or not (href := link.attrs.get("href")):
            return None

        title_el = veri.select_first("h3, .title, img[alt]")
        title    = (title_el.text(strip=True) or title_el.attrs.get("alt") or "") if title_el else ""
        title    = title.strip() or link.attrs.get("title")
        if not title:
            return None

        return SearchResult(
            title  = title,
            url    = self.fix_url(href),
            poster = self.fix_url(veri.select_poster("img")) or None,
            type   = "series" if "/series/" in href or "/movies/" not in href else "movie",
        )

    def _parse_listing(self, secici: HTMLHelper) -> list[SearchResult]:
        kartlar = secici.select(self._containers)
        if not kartlar:
            # Kapsayıcı sınıfı olmayan temalarda görselli bağlantının ebeveyni kart sayılır
            kartlar = [a.parent for a in secici.select("a[href*='/video/']") if a.select_first("img") and a.parent]

        results = {}
        for veri in kartlar:
            if (item := self._parse_card(veri)) and item.url not in results:
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

    @staticmethod
    def _episode_number(href: str, title: str) -> int | None:
        if m := re.search(r"ep-(\d+)", href):
            return int(m.group(1))

        _, episode = HTMLHelper.extract_season_episode(title)
        return episode or HTMLHelper.get_int_from_text(title)

    async def load_item(self, url: str) -> MovieInfo | SeriesInfo:
        istek  = await self.httpx.get(url)
        secici = HTMLHelper(istek.text)

        title = secici.select_text("h1") or secici.select_text("title").split(" - ")[0]
        img   = secici.select_first(".post-thumbnail img, .video-poster img, article img")

        common_info = {
            "url"         : url,
            "poster"      : secici.meta_content("og:image") or (self.fix_url(img.attrs.get("data-src") or img.attrs.get("src")) if img else None),
            "title"       : title,
            "description" : secici.meta_content("og:description") or secici.select_text(".description, .plot, .story"),
            "tags"        : secici.select_texts("a[href*='/genre/']"),
            "year"        : secici.select_text("a[href*='/years/']"),
        }

        links = [
            a for a in secici.select("a[href*='/video/']")
                if a.select_first(".episode-number") or "/video/layl" in (a.attrs.get("href") or "") or "-ep-" in (a.attrs.get("href") or "")
        ] or secici.select("a[href*='-ep-']")

        episodes = []
        for link in links:
            ep_href = self.fix_url(link.attrs.get("href"))
            if not ep_href or ep_href == url:
                continue

            ep_title = link.text(strip=True) or link.select_text("span, div") or "Episode"
            episodes.append(Episode(
                episode = self._episode_number(ep_href, ep_title),
                title   = ep_title,
                url     = ep_href,
            ))

        if not episodes:
            return MovieInfo(**common_info)

        return SeriesInfo(**common_info, episodes=episodes)

    async def _from_iframe(self, src: str, referer: str) -> ExtractResult | list[ExtractResult] | None:
        if data := await self.extract(src, referer=referer):
            return data

        # Bilinen bir extractor yoksa iframe sayfası taranır
        istek = await self.httpx.get(src, headers={"Referer": referer})
        video = find_stream_url(Packer.unpack(istek.text)) or find_stream_url(istek.text)
        if not video:
            return None

        return ExtractResult(name=f"{self.name} - iframe", url=video, referer=src)

    async def load_links(self, url: str) -> list[ExtractResult]:
        istek  = await self.httpx.get(url, headers={"Referer": f"{self.main_url}/"})
        secici = HTMLHelper(istek.text)
        seen   = set()

        def _new(link: str | None) -> bool:
            if not link or link in seen:
                return False
            seen.add(link)
            return True

        # 1. iframe'ler
        iframes = [src for src in (self.fix_url(s) for s in secici.select_attrs("iframe[src]", "src")) if not self.is_blocked_embed(src) and _new(src)]

        results = []
        for data in await self.gather_with_timeout([self._from_iframe(src, url) for src in iframes], timeout=15):
            self.collect_results(results, data)

        # 2. <video> etiketleri
        for src in secici.select_attrs("video source[src], video[src]", "src"):
            if _new(src):
                results.append(self.direct_link(src, name=f"{self.name} - Direct", referer=url))

        # 3. Script içleri (packed olanlar önce açılır, sonra ham metin taranır)
        for script in secici.script_texts():
            video = find_stream_url(Packer.unpack(script)) or find_stream_url(script)
            if _new(video):
                results.append(self.direct_link(video, name=f"{self.name} - Script", referer=url))

        # 4. data-* attribute'lu sunucu butonları
        embeds = []
        for btn in secici.select(", ".join(f"[{attr}]" for attr in self._embed_attrs)):
            # Lazy-load görselleri de data-src taşır
            if btn.tag == "img":
                continue

            embed = next((v for attr in self._embed_attrs if (v := btn.attrs.get(attr))), None)
            if _new(embed):
                embeds.append(self.fix_url(embed))

        for data in await self.gather_with_limit([self.extract(embed, referer=url) for embed in embeds]):
            self.collect_results(results, data)

        konsol.log(f"[yellow][~] {self.name} » {len(results)} bağlantı » {url}")
        return self.deduplicate(results)
