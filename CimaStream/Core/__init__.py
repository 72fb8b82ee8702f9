# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .Helpers import (
    HTMLHelper,
    NodeHelper,
    HiddenPayload,
    ServerDescriptor,
    Packer,
    PACKED_REGEX,
    find_stream_url,
    find_all_stream_urls,
    is_segmented,
    DecodeError,
    MalformedChunk,
    InvalidCodepoint,
)

from .Plugin.PluginModels import MainPageResult, SearchResult, MovieInfo, Episode, SeriesInfo
from .Plugin.PluginBase    import PluginBase
from .Plugin.PluginLoader  import PluginLoader
from .Plugin.PluginManager import PluginManager

from .Extractor.ExtractorModels  import ExtractResult, Subtitle
from .Extractor.ExtractorBase    import ExtractorBase
from .Extractor.ExtractorLoader  import ExtractorLoader
from .Extractor.ExtractorManager import ExtractorManager
from .Extractor.ExtractorMixins  import (
    PackedJSExtractor,
    SOURCES_REGEX,
    M3U8_FILE_REGEX,
)
