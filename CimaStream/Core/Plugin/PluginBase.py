# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from ...CLI                       import konsol
from abc                          import ABC, abstractmethod
from cloudscraper                 import CloudScraper
from httpx                        import AsyncClient
from .PluginModels                import MainPageResult, SearchResult, MovieInfo, SeriesInfo
from ..Extractor.ExtractorManager import ExtractorManager
from ..Extractor.ExtractorModels  import ExtractResult
from urllib.parse                 import urljoin
import asyncio

class PluginBase(ABC):
    name        = "Plugin"
    language    = "ar"
    main_url    = "https://example.com"
    favicon     = f"https://www.google.com/s2/favicons?domain={main_url}&sz=64"
    description = "No description provided."

    main_page   = {}

    async def url_update(self, new_url: str):
        new_url        = new_url.rstrip("/")
        self.favicon   = self.favicon.replace(self.main_url, new_url)
        self.main_page = {url.replace(self.main_url, new_url): category for url, category in self.main_page.items()}
        self.main_url  = new_url

    def __init__(self, proxy: str | dict | None = None, ex_manager: str | ExtractorManager = "Extractors", shared_scraper=None):
        # cloudscraper - for bypassing Cloudflare
        # Proxy varsa yeni scraper oluştur, yoksa paylaşılanı kullan
        if proxy or not shared_scraper:
            self.cloudscraper = CloudScraper()
            if proxy:
                self.cloudscraper.proxies = proxy if isinstance(proxy, dict) else {"http": proxy, "https": proxy}
        else:
            self.cloudscraper = shared_scraper

        httpx_proxy = proxy
        if isinstance(proxy, dict):
            httpx_proxy = proxy.get("https") or proxy.get("http")

        # httpx - lightweight and safe for most HTTP requests
        self.httpx = AsyncClient(
            timeout          = 10,
            follow_redirects = True,
            proxy            = httpx_proxy
        )
        self.httpx.headers.update(self.cloudscraper.headers)
        self.httpx.cookies.update(self.cloudscraper.cookies)
        self.httpx.headers.update({
            "User-Agent"      : "Mozilla/5.0 (Linux; Android 13) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36",
            "Accept"          : "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language" : "ar,en-US;q=0.7,en;q=0.3"
        })

        # If an instance is passed, use it; otherwise create a new one
        if isinstance(ex_manager, ExtractorManager):
            self.ex_manager = ex_manager
        else:
            self.ex_manager = ExtractorManager(extractor_dir=ex_manager, proxy=proxy)

    @abstractmethod
    async def get_main_page(self, page: int, url: str, category: str) -> list[MainPageResult]:
        """Ana sayfadaki kategori içeriklerini döndürür."""
        pass

    @abstractmethod
    async def search(self, query: str) -> list[SearchResult]:
        """Kullanıcı arama sorgusuna göre sonuç döndürür."""
        pass

    @abstractmethod
    async def load_item(self, url: str) -> MovieInfo | SeriesInfo:
        """Bir medya öğesi hakkında detaylı bilgi döndürür."""
        pass

    @abstractmethod
    async def load_links(self, url: str) -> list[ExtractResult]:
        """
        Bir film ya da bölüm için oynatma bağlantılarını döndürür.

        Args:
            url: MovieInfo.url veya Episode.url

        Returns:
            ExtractResult listesi, her biri şu alanları içerir:
            - url (str, zorunlu): Video URL'si
            - name (str, zorunlu): Gösterim adı
            - referer (str, opsiyonel): Referer header
            - is_m3u8 (bool): HLS akışı mı
            - subtitles (list[Subtitle], opsiyonel): Altyazı listesi

        Example:
            [
                ExtractResult(
                    url="https://example.com/video.m3u8",
                    name="CimaNow | 1080p"
                )
            ]
        """
        pass

    # ========================
    # YARDIMCI METOTLAR
    # ========================

    def collect_results(self, results: list[ExtractResult], data: ExtractResult | list[ExtractResult] | None):
        """
        extract() dönüşünü (tekil, liste veya None) sonuç listesine ekler.

        Kullanım:
            data = await self.extract(url)
            self.collect_results(results, data)
        """
        if data:
            results.extend(data if isinstance(data, list) else [data])

    @staticmethod
    def deduplicate(results: list[ExtractResult], key: str = "url") -> list[ExtractResult]:
        """
        Sonuç listesinden tekrar eden URL'leri kaldırır.

        Args:
            results: ExtractResult listesi
            key: Deduplicate anahtarı ("url" veya "url+name")
        """
        seen    = set()
        uniques = []
        for res in results:
            k = (res.url, res.name) if key == "url+name" else res.url
            if k and k not in seen:
                uniques.append(res)
                seen.add(k)
        return uniques

    @staticmethod
    async def gather_with_limit(tasks: list, limit: int = 5):
        """
        Semaphore ile rate-limited paralel çalıştırma.

        Kullanım:
            tasks   = [self.extract(url) for url in urls]
            results = await self.gather_with_limit(tasks, limit=5)
        """
        sem = asyncio.Semaphore(limit)
        async def limited(coro):
            async with sem:
                return await coro
        return await asyncio.gather(*(limited(t) for t in tasks))

    async def gather_with_timeout(self, tasks: list, timeout: float = 5) -> list:
        """
        Görevleri aynı anda çalıştırır; her biri kendi süresiyle sınırlıdır.

        Süresi dolan veya hata veren görevin yerine None döner, diğerleri beklemeye devam eder.
        Sonuç sırası görev sırasıyla aynıdır.
        """
        async def guarded(index: int, coro):
            try:
                return await asyncio.wait_for(coro, timeout)
            except asyncio.TimeoutError:
                konsol.log(f"[red][!] {self.name} » Zaman aşımı ({timeout}s) » görev #{index}")
            except Exception as hata:
                konsol.log(f"[red][!] {self.name} » görev #{index} » {type(hata).__name__}: {hata}")
            return None

        return await asyncio.gather(*(guarded(i, t) for i, t in enumerate(tasks)))

    async def close(self):
        """Close HTTP client."""
        await self.httpx.aclose()

    def fix_url(self, url: str | None) -> str:
        if not url:
            return ""

        url = url.strip()
        if url.startswith("http") or url.startswith("{\""):
            return url.replace("\\", "")

        url = f"https:{url}" if url.startswith("//") else urljoin(f"{self.main_url}/", url)
        return url.replace("\\", "")

    @staticmethod
    def is_blocked_embed(url: str) -> bool:
        """Reklam / sosyal medya iframe'leri."""
        return any(x in url for x in ("google", "facebook"))

    def direct_link(self, url: str, name: str, referer: str | None = None, quality: str | None = None) -> ExtractResult:
        """Sayfada doğrudan bulunan .m3u8 / .mp4 bağlantısı için sonuç oluşturur."""
        return ExtractResult(
            name    = name if self.name in name else f"{self.name} | {name}",
            url     = self.fix_url(url),
            referer = referer or f"{self.main_url}/",
            quality = quality
        )

    async def extract(
        self,
        url: str,
        referer: str = None,
        prefix: str | None = None,
        name_override: str | None = None
    ) -> ExtractResult | list[ExtractResult] | None:
        """
        Extractor ile video URL'sini çıkarır.

        Args:
            url: Iframe veya video URL'si
            referer: Referer header (varsayılan: plugin main_url)
            prefix: İsmin başına eklenecek opsiyonel etiket (örn: sunucu adı)
            name_override: İsmi tamamen değiştirecek opsiyonel etiket (Extractor adını ezer)

        Returns:
            ExtractResult: Extractor sonucu (name prefix ile birleştirilmiş) veya None

        Extractor bulunamadığında veya hata oluştuğunda uyarı verir.
        """
        if referer is None:
            referer = f"{self.main_url}/"

        extractor = self.ex_manager.find_extractor(url)
        if not extractor:
            konsol.log(f"[magenta][?] {self.name} » Extractor bulunamadı: {url}")
            return None

        try:
            data = await extractor.extract(url, referer=referer)
        except Exception as hata:
            konsol.log(f"[red][!] {self.name} » Extractor hatası ({extractor.name}): {hata}")
            return None

        for item in (data if isinstance(data, list) else [data]):
            if name_override:
                item.name = name_override
            elif prefix and item.name:
                item.name = prefix if item.name.lower() in prefix.lower() else f"{prefix} | {item.name}"

        return data
