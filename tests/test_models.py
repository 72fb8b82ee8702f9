# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from CimaStream.Core import ExtractResult, MovieInfo, SeriesInfo, Episode, SearchResult, MainPageResult, HTMLHelper
from CimaStream.Core.Helpers import clean_title, normalize_empty, normalize_year


def test_extract_result_detects_stream_kind():
    assert ExtractResult(name="x", url="https://cdn.example/master.m3u8?t=1").is_m3u8
    assert not ExtractResult(name="x", url="https://cdn.example/movie.mp4").is_m3u8
    assert ExtractResult(name="x", url="https://cdn.example/play", is_m3u8=True).is_m3u8


def test_series_episodes_are_unique_and_sorted():
    info = SeriesInfo(
        url      = "https://site/series/x/",
        title    = "مسلسل الحفرة مترجم",
        episodes = [
            Episode(season=2, episode=1, url="https://site/e/2-1"),
            Episode(season=1, episode=2, url="https://site/e/1-2"),
            Episode(season=1, episode=1, url="https://site/e/1-1"),
            Episode(season=1, episode=1, url="https://site/e/1-1", title="tekrar"),
        ],
    )

    assert info.title == "الحفرة"
    assert [ep.url for ep in info.episodes] == ["https://site/e/1-1", "https://site/e/1-2", "https://site/e/2-1"]


def test_item_info_normalization():
    info = MovieInfo(
        url            = "https://site/film/x/",
        title          = "مشاهدة فيلم Dune(2021) اون لاين",
        tags           = ["خيال علمي", "", "مغامرة"],
        year           = "سنة الإنتاج: 2021",
        description    = "   ",
        content_rating = "غير معروف",
    )

    assert info.title == "Dune (2021)"
    assert info.tags == "خيال علمي, مغامرة"
    assert info.year == "2021"
    assert info.description is None
    assert info.content_rating is None


def test_listing_models_clean_titles():
    result = SearchResult(title="فيلم Oppenheimer مترجم HD", url="https://site/x", poster="")
    assert result.title == "Oppenheimer"
    assert result.poster is None

    card = MainPageResult(category="الأفلام", title="  Inception  ", url="https://site/y", type="series")
    assert card.title == "Inception"
    assert card.type == "series"


def test_episode_title_whitespace():
    assert Episode(title="  الحلقة \n 3 ", url="u").title == "الحلقة 3"


def test_normalizers():
    assert normalize_empty(" N/A ") is None
    assert normalize_empty(" x ") == "x"
    assert normalize_year(2019) == "2019"
    assert normalize_year("بدون") is None
    assert clean_title(None) is None


def test_html_helper_extractors():
    assert HTMLHelper.get_int_from_text("الموسم 3") == 3
    assert HTMLHelper.get_int_from_text(None) is None
    assert HTMLHelper.extract_season_episode("الموسم 2 الحلقة 14") == (2, 14)
    assert HTMLHelper.extract_season_episode("S03E07") == (3, 7)
    assert HTMLHelper.image_from_style("background-image: url('https://img/x.jpg');") == "https://img/x.jpg"
    assert HTMLHelper.image_from_style(None) is None


def test_html_helper_selectors():
    secici = HTMLHelper("""
        <meta property="og:image" content="https://img/p.jpg">
        <div class="Box ser"><a href="/x"><img data-lazy-src="/p.jpg" src="blank.gif"><b>Ad</b> metin</a></div>
        <script>var a = 1;</script>
    """)

    kutu = secici.select_first("div.Box")
    assert kutu.has_class("ser")
    assert kutu.select_poster("img") == "/p.jpg"
    assert kutu.select_first("a").own_text() == "metin"
    assert secici.meta_content("og:image") == "https://img/p.jpg"
    assert secici.script_texts() == ["var a = 1;"]
    assert secici.regex_first(r"var (\w+)") == "a"
