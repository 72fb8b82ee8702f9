# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations

from selectolax.parser import HTMLParser, Node
import html as _html
import re

# "الموسم 2" / "الحلقة 14" / "S02E14" / "ep-14"
_SEASON_REGEX  = re.compile(r"(?:الموسم|موسم|[Ss]eason)\s*(\d+)|[Ss](\d+)[Ee]\d+")
_EPISODE_REGEX = re.compile(r"(?:الحلقة|حلقة|[Ee]pisode|[Ee]p)\s*(\d+)|[Ss]\d+[Ee](\d+)|ep-(\d+)")


class NodeHelper:
    """
    selectolax.Node wrapper: HTMLHelper'ın seçici metotlarını element seviyesinde kullanım için sağlar.

    Kullanım:
        for veri in secici.select("div.Small--Box"):
            title  = veri.select_text("inner--title > h2")
            url    = veri.select_attr("a", "href")
            poster = veri.select_poster("img")
    """

    __slots__ = ("_node",)

    def __init__(self, node: Node):
        self._node = node

    def __getattr__(self, name):
        return getattr(self._node, name)

    def __bool__(self):
        return self._node is not None

    def __repr__(self):
        return f"NodeHelper(<{self._node.tag}>)" if self._node else "NodeHelper(None)"

    @property
    def attrs(self) -> dict:
        return self._node.attrs

    @property
    def tag(self) -> str:
        return self._node.tag

    @property
    def parent(self) -> NodeHelper | None:
        p = self._node.parent
        return NodeHelper(p) if p else None

    def text(self, *args, **kwargs) -> str:
        return self._node.text(*args, **kwargs)

    def own_text(self) -> str:
        """Child elementlerin text'ini katmadan elementin kendi metni."""
        return (self._node.text(strip=True, deep=False) or "").strip()

    def has_class(self, name: str) -> bool:
        return name in (self._node.attrs.get("class") or "").split()

    def select(self, selector: str) -> list[NodeHelper]:
        return [NodeHelper(n) for n in self._node.css(selector)]

    def select_first(self, selector: str | None = None) -> NodeHelper | None:
        if not selector:
            return self
        result = self._node.css_first(selector)
        return NodeHelper(result) if result else None

    def select_text(self, selector: str | None = None) -> str:
        el = self._node.css_first(selector) if selector else self._node
        if not el:
            return ""
        val = el.text(strip=True)
        return _html.unescape(val) if val else ""

    def select_texts(self, selector: str) -> list[str]:
        return [_html.unescape(t) for el in self._node.css(selector) if (t := el.text(strip=True))]

    def select_attr(self, selector: str | None, attr: str) -> str | None:
        el = self._node.css_first(selector) if selector else self._node
        return el.attrs.get(attr) if el else None

    def select_attrs(self, selector: str, attr: str) -> list[str]:
        return [v for el in self._node.css(selector) if (v := el.attrs.get(attr))]

    def select_poster(self, selector: str = "img") -> str | None:
        """Lazy-load attribute'ları sırayla dener: data-src, data-lazy-src, src."""
        el = self._node.css_first(selector) if selector else self._node
        if not el:
            return None
        return el.attrs.get("data-src") or el.attrs.get("data-lazy-src") or el.attrs.get("src") or None


class HTMLHelper:
    """
    Selectolax ile HTML parsing işlemlerini temiz, kısa ve okunabilir hale getiren yardımcı sınıf.
    """

    def __init__(self, html: str):
        self.html   = html
        self.parser = HTMLParser(html)

    # ========================
    # SELECTOR (CSS) İŞLEMLERİ
    # ========================

    def select(self, selector: str) -> list[NodeHelper]:
        """CSS selector ile tüm eşleşen elementleri döndür."""
        return [NodeHelper(n) for n in self.parser.css(selector)]

    def select_first(self, selector: str | None) -> NodeHelper | None:
        """CSS selector ile ilk eşleşen elementi döndür."""
        if not selector:
            return None
        result = self.parser.css_first(selector)
        return NodeHelper(result) if result else None

    def select_text(self, selector: str | None = None) -> str:
        el = self.select_first(selector)
        if not el:
            return ""
        val = el.text(strip=True)
        return _html.unescape(val) if val else ""

    def select_texts(self, selector: str) -> list[str]:
        return [_html.unescape(t) for el in self.select(selector) if (t := el.text(strip=True))]

    def select_attr(self, selector: str | None, attr: str) -> str | None:
        el = self.select_first(selector)
        return el.attrs.get(attr) if el else None

    def select_attrs(self, selector: str, attr: str) -> list[str]:
        return [v for el in self.select(selector) if (v := el.attrs.get(attr))]

    def select_poster(self, selector: str = "img") -> str | None:
        el = self.select_first(selector)
        return el.select_poster(None) if el else None

    def meta_content(self, prop: str) -> str | None:
        """<meta property="og:image" content="..."> değerini döndürür."""
        return self.select_attr(f"meta[property='{prop}']", "content") or None

    def script_texts(self) -> list[str]:
        """Tüm inline <script> içerikleri."""
        return [t for el in self.parser.css("script") if (t := el.text(deep=True))]

    # ========================
    # REGEX İŞLEMLERİ
    # ========================

    def _regex_source(self, target: str | int | None) -> str:
        return target if isinstance(target, str) else self.html

    def regex_first(self, pattern: str, target: str | int | None = None, group: int | None = 1, flags: int = 0) -> str | tuple | None:
        """Regex ile arama yap, istenen grubu döndür (group=None ise tüm grupları tuple olarak döndür)."""
        match = re.search(pattern, self._regex_source(target), flags=flags)
        if not match:
            return None

        if group is None:
            return match.groups()

        last_idx = match.lastindex or 0
        return match.group(group) if last_idx >= group else match.group(0)

    def regex_all(self, pattern: str, target: str | int | None = None) -> list[str] | list[tuple]:
        return re.findall(pattern, self._regex_source(target))

    # ========================
    # ÖZEL AYIKLAYICILAR
    # ========================

    @staticmethod
    def get_int_from_text(text: str | None) -> int | None:
        """Metindeki ilk sayıyı döndürür ("الموسم 3" → 3)."""
        if not text:
            return None
        m = re.search(r"\d+", text)
        return int(m.group(0)) if m else None

    @staticmethod
    def image_from_style(style: str | None) -> str | None:
        """`background-image: url('...')` içinden görsel adresini çıkarır."""
        if not style:
            return None
        m = re.search(r"url\((.*?)\)", style)
        return (m.group(1).strip("'\" ") or None) if m else None

    @staticmethod
    def extract_season_episode(text: str) -> tuple[int | None, int | None]:
        """Metin içinden sezon ve bölüm numarasını çıkar."""
        s = _SEASON_REGEX.search(text or "")
        e = _EPISODE_REGEX.search(text or "")

        s_val = next((int(g) for g in s.groups() if g), None) if s else None
        e_val = next((int(g) for g in e.groups() if g), None) if e else None

        return s_val, e_val
