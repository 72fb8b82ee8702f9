# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

import asyncio, base64, inspect

import httpx
import pytest

from CimaStream.Core import ExtractorManager
from CimaStream.Core.Helpers.HiddenPayload import CODEPOINT_OFFSET


def encode_char(char: str, offset: int = CODEPOINT_OFFSET) -> str:
    return base64.b64encode(str(ord(char) + offset).encode()).decode()


def hide_markup(markup: str) -> str:
    """Verilen HTML'i hide_my_HTML_ blob'una çevirir."""
    return ".".join(encode_char(char) for char in markup)


def watching_page(markup: str) -> str:
    blob  = hide_markup(markup)
    half  = len(blob) // 2
    return (
        "<html><body><script>\n"
        f"var hide_my_HTML_ = '{blob[:half]}' +\n    \"{blob[half:]}\";\n"
        "</script></body></html>"
    )


def packed_js(payload: str, words: list[str], base: int = 36) -> str:
    sozluk = "|".join(words)
    return (
        "eval(function(p,a,c,k,e,d){while(c--)if(k[c])p=p.replace(new RegExp('\\\\b'+c.toString(a)+'\\\\b','g'),k[c]);return p}"
        f"('{payload}',{base},{len(words)},'{sozluk}'.split('|'),0,{{}}))"
    )


# setup({file:"https://cdn.example/master.m3u8"})
STREAMWISH_PAGE = "<html><script>" + packed_js(
    payload = '0({1:"2://3.4/5.6"})',
    words   = ["setup", "file", "https", "cdn", "example", "master", "m3u8"],
) + "</script></html>"


class Router:
    """URL (sorgu hariç) → yanıt eşlemesi; değer str veya (async) callable olabilir."""

    def __init__(self, routes: dict | None = None):
        self.routes = dict(routes or {})
        self.calls  = []

    def count(self, url: str) -> int:
        return sum(1 for call in self.calls if call == url)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        key = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        self.calls.append(key)

        hedef = self.routes.get(key)
        if hedef is None:
            return httpx.Response(404, text="not found")

        if callable(hedef):
            hedef = hedef(request)
            if inspect.isawaitable(hedef):
                hedef = await hedef

        return hedef if isinstance(hedef, httpx.Response) else httpx.Response(200, text=hedef)


def mock_client(router: Router) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(router), follow_redirects=True)


@pytest.fixture(scope="session")
def ex_manager():
    return ExtractorManager()


@pytest.fixture
def router():
    return Router()


@pytest.fixture
def make_plugin(ex_manager, router):
    """Plugin'i ve tüm extractor'ları aynı sahte transport'a bağlar."""
    def _make(plugin_type):
        plugin       = plugin_type(ex_manager=ex_manager)
        plugin.httpx = mock_client(router)

        for extractor_type in ex_manager.extractor_types:
            ex_manager._instance(extractor_type).httpx = mock_client(router)

        return plugin

    return _make


def run(coro):
    return asyncio.run(coro)
