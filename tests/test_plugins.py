# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

import base64

import httpx

from CimaStream.Core              import PluginManager, MovieInfo, SeriesInfo
from CimaStream.Plugins.CimaClub  import CimaClub
from CimaStream.Plugins.MyCima    import MyCima
from CimaStream.Plugins.CimaLight import CimaLight
from CimaStream.Plugins.Eishq     import Eishq
from CimaStream.Plugins.Prestige  import Prestige
from conftest                     import STREAMWISH_PAGE, packed_js, run

WISH_EMBED = "https://streamwish.to/e/xyz"
WISH_PAGE  = "https://streamwish.to/xyz"
WISH_M3U8  = "https://cdn.example/master.m3u8"


def test_plugin_manager_loads_all_sites(ex_manager):
    manager = PluginManager(ex_manager=ex_manager)

    assert manager.get_plugin_names() == ["CimaClub", "CimaLight", "CimaNow", "Eishq", "MyCima", "Prestige"]
    assert isinstance(manager.select_plugin("MyCima"), MyCima)
    assert manager.select_plugin("Yok") is None

    run(manager.close_plugins())


# ========================
# CimaClub
# ========================

def test_cimaclub_links(make_plugin, router):
    router.routes.update({
        "https://ciimaclub.club/film-x/watch/" : f"""
            <ul id="watch">
                <li data-watch="{WISH_EMBED}">Wish</li>
                <li data-watch="{WISH_EMBED}">Wish 2</li>
                <li data-watch="https://unknown.example/v/1">Bilinmeyen</li>
            </ul>
            <ul class="ServersList Download">
                <li><a href="https://dl.example/film-1080.mp4"><div class="text"><span>1080p</span></div></a></li>
            </ul>
        """,
        WISH_PAGE : STREAMWISH_PAGE,
    })
    plugin  = make_plugin(CimaClub)
    results = run(plugin.load_links("https://ciimaclub.club/film-x/"))

    assert [(r.name, r.url) for r in results] == [
        ("StreamWish",                "https://cdn.example/master.m3u8"),
        ("CimaClub | 1080p - مباشر",  "https://dl.example/film-1080.mp4"),
    ]
    assert router.count(WISH_PAGE) == 1


def test_cimaclub_series_seasons(make_plugin, router):
    episodes_page = """
        <h1 class="PostTitle">مسلسل Dark</h1>
        <section class="allseasonss">
            <div class="Small--Box"><a href="https://ciimaclub.club/series/dark/"><span class="epnum">الموسم 1</span></a></div>
            <div class="Small--Box"><a href="https://ciimaclub.club/series/dark-2/"><span class="epnum">الموسم 2</span></a></div>
        </section>
        <section class="allepcont"><div class="row">
            <a href="https://ciimaclub.club/episode/dark-{s}-2/"><div class="ep-info"><h2>الحلقة 2</h2></div><div class="epnum"><span>الحلقة</span>2</div></a>
            <a href="https://ciimaclub.club/episode/dark-{s}-1/"><div class="ep-info"><h2>الحلقة 1</h2></div><div class="epnum"><span>الحلقة</span>1</div></a>
        </div></section>
    """
    router.routes.update({
        "https://ciimaclub.club/series/dark/"   : episodes_page.replace("{s}", "1"),
        "https://ciimaclub.club/series/dark-2/" : episodes_page.replace("{s}", "2"),
    })
    plugin = make_plugin(CimaClub)
    info   = run(plugin.load_item("https://ciimaclub.club/series/dark/"))

    assert isinstance(info, SeriesInfo)
    assert info.title == "Dark"
    assert [(ep.season, ep.episode) for ep in info.episodes] == [(1, 1), (1, 2), (2, 1), (2, 2)]
    assert router.count("https://ciimaclub.club/series/dark/") == 1


# ========================
# MyCima
# ========================

def test_mycima_decode_play_url():
    encoded = base64.b64encode(b"https://mycima.pics/watch/abc").decode()

    assert MyCima.decode_play_url(f"https://mycima.pics/play/{encoded}/") == "https://mycima.pics/watch/abc"
    assert MyCima.decode_play_url("https://mycima.pics/play/%%%/") is None
    assert MyCima.decode_play_url("https://mycima.pics/other/") is None


def test_mycima_links(make_plugin, router):
    hedef = "https://mycima.pics/watch/abc"
    kod   = base64.b64encode(hedef.encode()).decode()

    router.routes.update({
        "https://mycima.pics/film-x/" : f"""
            <ul id="watch"><li data-watch="https://mycima.pics/play/{kod}/">سيرفر</li></ul>
            <div id="downloads"><a href="https://dl.example/720.mp4">720p</a></div>
        """,
        hedef     : f'<iframe src="{WISH_EMBED}"></iframe>',
        WISH_PAGE : STREAMWISH_PAGE,
    })
    plugin  = make_plugin(MyCima)
    results = run(plugin.load_links("https://mycima.pics/film-x/"))

    assert [(r.name, r.url, r.quality) for r in results] == [
        ("StreamWish",             WISH_M3U8,                   None),
        ("MyCima | 720p Download", "https://dl.example/720.mp4", "720p"),
    ]


def test_mycima_seasons_use_ajax(make_plugin, router):
    posted = []

    def episodes(request: httpx.Request):
        posted.append(request.content.decode())
        return """
            <a href="https://mycima.pics/episode/1/"><episodetitle class="EpisodeTitle">الحلقة 1</episodetitle></a>
            <a href="https://mycima.pics/episode/2/"><episodetitle class="EpisodeTitle"></episodetitle></a>
        """

    router.routes.update({
        "https://mycima.pics/series/x/" : """
            <div class="Title--Content--Single-begin"><h1>مسلسل X <a>(2020)</a></h1></div>
            <div class="SeasonsList"><ul><li><a data-season="55">الموسم 1</a></li></ul></div>
            <script>var data = { post_id: '987' };</script>
        """,
        "https://mycima.pics/wp-content/themes/mycima/Ajaxt/Single/Episodes.php" : episodes,
    })
    plugin = make_plugin(MyCima)
    info   = run(plugin.load_item("https://mycima.pics/series/x/"))

    assert isinstance(info, SeriesInfo)
    assert info.year == "2020"
    assert [(ep.season, ep.episode, ep.title) for ep in info.episodes] == [(1, 1, "الحلقة 1"), (1, 2, "حلقة 2")]
    assert posted == ["season=55&post_id=987"]


# ========================
# CimaLight
# ========================

def test_cimalight_falls_back_to_content_page(make_plugin, router):
    router.routes.update({
        "https://cimalite.cam/movie/x/watch/" : '<iframe src="https://www.google.com/maps"></iframe>',
        "https://cimalite.cam/movie/x/"       : f'<ul class="servers"><li data-index="{WISH_EMBED}">Wish</li></ul>',
        WISH_PAGE                             : STREAMWISH_PAGE,
    })
    plugin  = make_plugin(CimaLight)
    results = run(plugin.load_links("https://cimalite.cam/movie/x/"))

    assert [r.url for r in results] == [WISH_M3U8]


def test_cimalight_listing_is_unique(make_plugin, router):
    router.routes["https://cimalite.cam/category/movies/"] = """
        <div class="box-item"><a href="/movie/a/" title="فيلم A مترجم"><img data-src="//img.example/a.jpg"></a></div>
        <article><a href="/movie/a/" title="فيلم A مترجم"></a></article>
        <article><a href="/series/b/"><h3>B</h3></a></article>
    """
    plugin  = make_plugin(CimaLight)
    results = run(plugin.get_main_page(1, "https://cimalite.cam/category/movies/", "أفلام"))

    assert [(r.title, r.url, r.type, r.poster) for r in results] == [
        ("A", "https://cimalite.cam/movie/a/", "movie", "https://img.example/a.jpg"),
        ("B", "https://cimalite.cam/series/b/", "series", None),
    ]


# ========================
# Eishq
# ========================

def test_eishq_collects_every_source(make_plugin, router):
    iframe_page = "<script>" + packed_js('0.1({2:"3://4.5/6.7"})', ["jw", "setup", "file", "https", "cdn", "example", "iframe", "m3u8"]) + "</script>"

    router.routes.update({
        "https://new.eishq.net/video/ep-1/" : f"""
            <iframe src="https://www.facebook.com/plugins/like"></iframe>
            <iframe src="//player.eishq.example/embed/1"></iframe>
            <video><source src="https://cdn.example/direct.mp4"></video>
            <script>var player = {{ file: "https://cdn.example/script.m3u8" }};</script>
            <img data-src="https://img.example/poster.jpg">
            <div class="server" data-embed="{WISH_EMBED}">Wish</div>
        """,
        "https://player.eishq.example/embed/1" : iframe_page,
        WISH_PAGE                               : STREAMWISH_PAGE,
    })
    plugin  = make_plugin(Eishq)
    results = run(plugin.load_links("https://new.eishq.net/video/ep-1/"))

    assert [(r.name, r.url) for r in results] == [
        ("Eishq - iframe", "https://cdn.example/iframe.m3u8"),
        ("Eishq - Direct", "https://cdn.example/direct.mp4"),
        ("Eishq - Script", "https://cdn.example/script.m3u8"),
        ("StreamWish",     WISH_M3U8),
    ]
    assert router.count("https://www.facebook.com/plugins/like") == 0


def test_eishq_scans_raw_script_after_packed_block(make_plugin, router):
    script = packed_js("0 1", ["var", "x"]) + ';player.setup({file: "https://cdn.example/raw.m3u8"});'
    router.routes["https://new.eishq.net/video/ep-2/"] = f"<script>{script}</script>"

    plugin  = make_plugin(Eishq)
    results = run(plugin.load_links("https://new.eishq.net/video/ep-2/"))

    assert [(r.name, r.url) for r in results] == [("Eishq - Script", "https://cdn.example/raw.m3u8")]


def test_eishq_search_failure_is_empty(make_plugin, router):
    def boom(request):
        raise httpx.ConnectError("bağlantı yok", request=request)

    router.routes["https://new.eishq.net/"] = boom
    plugin = make_plugin(Eishq)

    assert run(plugin.search("عشق")) == []


# ========================
# Prestige
# ========================

def test_prestige_play_page(make_plugin, router):
    script = packed_js('0 1="2://3.4/5.6";0 7="2://3.4/8.9"', ["var", "hls", "https", "cdn", "example", "a", "m3u8", "mp4url", "b", "mp4"])

    router.routes.update({
        "https://hp.brstej.com/play.php" : f"""
            <button class="watchButton" data-embed-url="{WISH_EMBED}">سيرفر 1</button>
            <iframe src="//streamwish.to/e/xyz"></iframe>
            <script>{script}</script>
            <script>var again = "https://cdn.example/a.m3u8";</script>
        """,
        WISH_PAGE : STREAMWISH_PAGE,
    })
    plugin  = make_plugin(Prestige)
    results = run(plugin.load_links("https://hp.brstej.com/watch.php?vid=abc"))

    assert [(r.name, r.url, r.is_m3u8) for r in results] == [
        ("StreamWish",     WISH_M3U8,                     True),
        ("Prestige - HLS", "https://cdn.example/a.m3u8",  True),
        ("Prestige - MP4", "https://cdn.example/b.mp4",   False),
    ]
    assert router.count(WISH_PAGE) == 1


def test_prestige_scans_raw_script_after_packed_block(make_plugin, router):
    script = packed_js("0 1", ["var", "x"]) + ';jwplayer().setup({file: "https://cdn.example/raw.mp4"});'
    router.routes["https://hp.brstej.com/play.php"] = f"<script>{script}</script>"

    plugin  = make_plugin(Prestige)
    results = run(plugin.load_links("https://hp.brstej.com/watch.php?vid=raw"))

    assert [(r.name, r.url, r.is_m3u8) for r in results] == [("Prestige - MP4", "https://cdn.example/raw.mp4", False)]


def test_prestige_single_video_is_movie(make_plugin, router):
    router.routes["https://hp.brstej.com/watch.php"] = """
        <meta property="og:image" content="https://img.example/p.jpg">
        <h1>حلقة خاصة</h1>
    """
    plugin = make_plugin(Prestige)
    info   = run(plugin.load_item("https://hp.brstej.com/watch.php?vid=abc"))

    assert isinstance(info, MovieInfo)
    assert info.poster == "https://img.example/p.jpg"


def test_url_update_moves_categories(make_plugin):
    plugin = make_plugin(MyCima)
    run(plugin.url_update("https://mycima.video/"))

    assert plugin.main_url == "https://mycima.video"
    assert "https://mycima.video/movies/" in plugin.main_page
    assert plugin.fix_url("/film/x/") == "https://mycima.video/film/x/"
