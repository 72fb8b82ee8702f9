# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from abc              import ABC, abstractmethod
from cloudscraper     import CloudScraper
from httpx            import AsyncClient
from urllib.parse     import urljoin, urlparse
from .ExtractorModels import ExtractResult
import asyncio

class ExtractorBase(ABC):
    # Çıkarıcının temel özellikleri
    name     = "Extractor"
    main_url = ""

    # Boşsa main_url'nin domaini kullanılır
    supported_domains: list[str] = []

    def __init__(self, proxy: str | dict | None = None):
        self.cloudscraper = CloudScraper()
        if proxy:
            self.cloudscraper.proxies = proxy if isinstance(proxy, dict) else {"http": proxy, "https": proxy}

        httpx_proxy = proxy.get("https") or proxy.get("http") if isinstance(proxy, dict) else proxy

        self.httpx = AsyncClient(
            timeout          = 10,
            follow_redirects = True,
            proxy            = httpx_proxy
        )
        self.httpx.headers.update(self.cloudscraper.headers)
        self.httpx.headers.update({
            "User-Agent" : "Mozilla/5.0 (Linux; Android 13) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36",
            "Accept"     : "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
        })

    @classmethod
    def can_handle_url(cls, url: str) -> bool:
        """URL bu çıkarıcının domainlerinden birine mi ait?"""
        host    = urlparse(url).netloc.lower()
        domains = cls.supported_domains or [urlparse(cls.main_url).netloc]
        return any(host == domain or host.endswith(f".{domain}") for domain in domains if domain)

    def get_base_url(self, url: str) -> str:
        parsed = urlparse(url)
        return f"{parsed.scheme}://{parsed.netloc}"

    def fix_url(self, url: str | None) -> str:
        if not url:
            return ""

        if url.startswith("http"):
            return url.replace("\\", "")

        url = f"https:{url}" if url.startswith("//") else urljoin(self.main_url, url)
        return url.replace("\\", "")

    async def async_cf_get(self, url: str, **kwargs):
        """cloudscraper.get() için async wrapper, Cloudflare korumalı hostlar için."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, lambda: self.cloudscraper.get(url, **kwargs))

    @abstractmethod
    async def extract(self, url: str, referer: str | None = None) -> ExtractResult | list[ExtractResult]:
        """Embed URL'sinden oynatılabilir bağlantı(lar) döndürür; bulunamazsa ValueError."""
        pass

    async def close(self):
        await self.httpx.aclose()
