# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .PluginLoader                import PluginLoader
from .PluginBase                  import PluginBase
from ..Extractor.ExtractorManager import ExtractorManager
from cloudscraper                 import CloudScraper

class PluginManager:
    def __init__(self, plugin_dir: str = "Plugins", ex_manager: str | ExtractorManager = "Extractors", proxy: str | dict | None = None):
        # Tüm plugin'ler tek bir ExtractorManager ve (proxy yoksa) tek bir cloudscraper paylaşır
        self.ex_manager     = ex_manager if isinstance(ex_manager, ExtractorManager) else ExtractorManager(ex_manager, proxy=proxy)
        self.shared_scraper = CloudScraper()
        self.plugin_loader  = PluginLoader(plugin_dir)
        self.plugins: dict[str, PluginBase] = {
            name: plugin_type(proxy=proxy, ex_manager=self.ex_manager, shared_scraper=self.shared_scraper)
                for name, plugin_type in self.plugin_loader.load_all().items()
        }

    def get_plugin_names(self) -> list[str]:
        return sorted(self.plugins.keys())

    def select_plugin(self, plugin_name: str) -> PluginBase | None:
        return self.plugins.get(plugin_name)

    async def close_plugins(self):
        for plugin in self.plugins.values():
            await plugin.close()
        await self.ex_manager.close()
