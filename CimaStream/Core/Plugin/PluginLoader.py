# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from ...CLI      import konsol
from .PluginBase import PluginBase
import importlib, importlib.util, inspect, os

class PluginLoader:
    def __init__(self, plugins_dir: str = "Plugins"):
        self.package_name  = __name__.split(".")[0]
        self.package_dir   = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        self.is_external   = os.path.isabs(plugins_dir)
        self.plugins_dir   = plugins_dir if self.is_external else os.path.join(self.package_dir, plugins_dir)
        self.module_prefix = f"{self.package_name}.{plugins_dir.replace(os.sep, '.')}"

    def _load_module(self, module_name: str):
        if not self.is_external:
            return importlib.import_module(f"{self.module_prefix}.{module_name}")

        spec   = importlib.util.spec_from_file_location(module_name, os.path.join(self.plugins_dir, f"{module_name}.py"))
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    def load_all(self) -> dict[str, type[PluginBase]]:
        """Modül adı → plugin sınıfı."""
        if not os.path.isdir(self.plugins_dir):
            konsol.log(f"[red][!] Plugin dizini bulunamadı: {self.plugins_dir}")
            return {}

        plugins = {}
        for dosya in sorted(os.listdir(self.plugins_dir)):
            if not dosya.endswith(".py") or dosya.startswith("__"):
                continue

            module_name = dosya[:-3]
            try:
                module = self._load_module(module_name)
            except Exception as hata:
                konsol.log(f"[red][!] Plugin yüklenemedi: {module_name} » {type(hata).__name__}: {hata}")
                continue

            for _, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, PluginBase) and not inspect.isabstract(obj) and obj.__module__ == module.__name__:
                    plugins[module_name] = obj
                    break

        return plugins
