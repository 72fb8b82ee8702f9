# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .ExtractorLoader import ExtractorLoader
from .ExtractorBase   import ExtractorBase

class ExtractorManager:
    def __init__(self, extractor_dir: str = "Extractors", proxy: str | dict | None = None):
        self.extractor_loader = ExtractorLoader(extractor_dir)
        self.extractor_types  = self.extractor_loader.load_all()
        self.proxy            = proxy
        self._instances: dict[type[ExtractorBase], ExtractorBase] = {}

    def _instance(self, extractor_type: type[ExtractorBase]) -> ExtractorBase:
        # HTTP istemcileri ilk kullanımda açılır
        if extractor_type not in self._instances:
            self._instances[extractor_type] = extractor_type(proxy=self.proxy)
        return self._instances[extractor_type]

    def find_extractor(self, link: str) -> ExtractorBase | None:
        for extractor_type in self.extractor_types:
            if extractor_type.can_handle_url(link):
                return self._instance(extractor_type)

        return None

    def map_links(self, links: list[str]) -> dict[str, str]:
        """Bağlantı → çıkarıcı adı eşlemesi; tanınmayanlar atlanır."""
        return {
            link: extractor.name
                for link in links
                    if (extractor := self.find_extractor(link))
        }

    async def close(self):
        for extractor in self._instances.values():
            await extractor.close()
        self._instances.clear()
