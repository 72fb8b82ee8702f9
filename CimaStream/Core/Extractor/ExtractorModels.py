# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from pydantic   import BaseModel, Field, model_validator
from ..Helpers  import is_segmented


class Subtitle(BaseModel):
    """Altyazı; çekirdek tarafından dokunulmadan aktarılır."""
    name : str
    url  : str


class ExtractResult(BaseModel):
    """
    Oynatılabilir bağlantı.

    - name       : Gösterim adı (kaynak + kalite bilgisi)
    - url        : Video URL'si
    - referer    : Oynatıcının göndermesi gereken Referer
    - is_m3u8    : HLS akışı mı? Verilmezse URL'den çıkarılır
    """
    name       : str
    url        : str
    referer    : str | None     = None
    user_agent : str | None     = None
    quality    : str | None     = None
    is_m3u8    : bool | None    = None
    subtitles  : list[Subtitle] = Field(default_factory=list)

    @model_validator(mode="after")
    def detect_stream_kind(self) -> ExtractResult:
        if self.is_m3u8 is None:
            self.is_m3u8 = is_segmented(self.url)
        return self
