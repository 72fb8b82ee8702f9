# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
Core/Helpers: Tüm model, base sınıf ve plugin'ler tarafından paylaşılan yardımcılar.
"""

from .TitleHelper   import clean_title
from .Normalizer    import normalize_empty, normalize_year
from .HTMLHelper    import HTMLHelper, NodeHelper
from .Errors        import DecodeError, MalformedChunk, InvalidCodepoint
from .HiddenPayload import HiddenPayload, ServerDescriptor
from .Packer        import Packer, PACKED_REGEX
from .LinkScanner   import find_stream_url, find_all_stream_urls, is_segmented
