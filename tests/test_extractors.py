# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

import pytest

from CimaStream.Core import ExtractorManager, PackedJSExtractor
from conftest        import Router, STREAMWISH_PAGE, mock_client, packed_js, run


def test_all_extractors_are_loaded(ex_manager):
    names = {extractor.name for extractor in ex_manager.extractor_types}
    assert {"Filemoon", "StreamWish", "VidHide", "Vidora", "Voe", "Uqload", "StreamTape"} <= names


@pytest.mark.parametrize("link, expected", [
    ("https://streamwish.to/e/abc",       "StreamWish"),
    ("https://www.embedwish.com/e/abc",   "StreamWish"),
    ("https://uqload.cx/embed-x.html",    "Uqload"),
    ("https://unknown.example/embed/1",   None),
])
def test_find_extractor(ex_manager, link, expected):
    extractor = ex_manager.find_extractor(link)
    assert (extractor.name if extractor else None) == expected


def test_find_extractor_reuses_instance(ex_manager):
    assert ex_manager.find_extractor("https://streamwish.to/e/a") is ex_manager.find_extractor("https://streamwish.to/e/b")


def test_map_links_skips_unknown(ex_manager):
    assert ex_manager.map_links(["https://streamwish.to/e/a", "https://nope.example/x"]) == {"https://streamwish.to/e/a": "StreamWish"}


def test_missing_directory_loads_nothing(tmp_path):
    assert ExtractorManager(extractor_dir=str(tmp_path / "yok")).extractor_types == []


def test_streamwish_unpacks_player(ex_manager):
    router = Router({"https://streamwish.to/abc": STREAMWISH_PAGE})

    extractor       = ex_manager.find_extractor("https://streamwish.to/e/abc")
    extractor.httpx = mock_client(router)
    result          = run(extractor.extract("https://streamwish.to/e/abc"))

    assert isinstance(extractor, PackedJSExtractor)
    assert result.url == "https://cdn.example/master.m3u8"
    assert result.is_m3u8
    assert result.referer == "https://streamwish.to/"


def test_streamwish_without_player_raises(ex_manager):
    router = Router({"https://streamwish.to/abc": "<html>silindi</html>"})

    extractor       = ex_manager.find_extractor("https://streamwish.to/e/abc")
    extractor.httpx = mock_client(router)

    with pytest.raises(ValueError):
        run(extractor.extract("https://streamwish.to/e/abc"))


def test_uqload_reads_sources(ex_manager):
    router = Router({"https://uqload.cx/embed-x.html": 'player({sources: ["https://m1.uqload.cx/v.mp4"]})'})

    extractor       = ex_manager.find_extractor("https://uqload.cx/embed-x.html")
    extractor.httpx = mock_client(router)
    result          = run(extractor.extract("https://uqload.cx/embed-x.html", referer="https://site/"))

    assert result.url == "https://m1.uqload.cx/v.mp4"
    assert not result.is_m3u8


def test_vidhide_returns_every_quality(ex_manager):
    page   = "<script>" + packed_js('0 1={"2":"3://4.5/6.7","8":"3://4.5/9.7"}', ["var", "links", "hls2", "https", "cdn", "example", "hd", "m3u8", "hls4", "sd"]) + "</script>"
    router = Router({"https://vidhidepro.com/v/abc": page})

    extractor       = ex_manager.find_extractor("https://vidhidepro.com/embed/abc")
    extractor.httpx = mock_client(router)
    results         = run(extractor.extract("https://vidhidepro.com/embed/abc"))

    assert [r.url for r in results] == ["https://cdn.example/hd.m3u8", "https://cdn.example/sd.m3u8"]
    assert all(r.name == "VidHide" for r in results)


def test_streamtape_builds_robotlink(ex_manager):
    router = Router({
        "https://streamtape.com/e/abc"    : "document.getElementById('robotlink').innerHTML = '//streamtape.com/get_video?id=abc&expires=1'+ ('xcd&token=tok').substring(2).substring(1);",
        "https://streamtape.com/get_video" : "",
    })

    extractor       = ex_manager.find_extractor("https://streamtape.com/e/abc")
    extractor.httpx = mock_client(router)
    result          = run(extractor.extract("https://streamtape.com/e/abc"))

    assert result.url == "https://streamtape.com/get_video?id=abc&expires=1&token=tok"
    assert not result.is_m3u8
