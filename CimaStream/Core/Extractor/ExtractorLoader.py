# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from ...CLI         import konsol
from .ExtractorBase import ExtractorBase
import importlib, importlib.util, inspect, os

class ExtractorLoader:
    def __init__(self, extractors_dir: str = "Extractors"):
        # Göreli dizinler paket içinden, mutlak dizinler dosya sisteminden yüklenir
        self.package_name   = __name__.split(".")[0]
        self.package_dir    = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        self.is_external    = os.path.isabs(extractors_dir)
        self.extractors_dir = extractors_dir if self.is_external else os.path.join(self.package_dir, extractors_dir)
        self.module_prefix  = f"{self.package_name}.{extractors_dir.replace(os.sep, '.')}"

    def _module_names(self) -> list[str]:
        if not os.path.isdir(self.extractors_dir):
            konsol.log(f"[red][!] Extractor dizini bulunamadı: {self.extractors_dir}")
            return []

        return sorted(
            dosya[:-3]
                for dosya in os.listdir(self.extractors_dir)
                    if dosya.endswith(".py") and not dosya.startswith("__")
        )

    def _import(self, module_name: str):
        if not self.is_external:
            return importlib.import_module(f"{self.module_prefix}.{module_name}")

        path = os.path.join(self.extractors_dir, f"{module_name}.py")
        spec = importlib.util.spec_from_file_location(module_name, path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    def load_all(self) -> list[type[ExtractorBase]]:
        extractors = []
        for module_name in self._module_names():
            try:
                module = self._import(module_name)
            except Exception as hata:
                konsol.log(f"[red][!] Extractor yüklenemedi: {module_name} » {type(hata).__name__}: {hata}")
                continue

            for _, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, ExtractorBase) and not inspect.isabstract(obj) and obj.__module__ == module.__name__:
                    extractors.append(obj)

        return extractors
