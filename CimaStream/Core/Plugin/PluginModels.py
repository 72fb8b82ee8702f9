# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from pydantic   import BaseModel, field_validator, model_validator
from typing     import Literal
from ..Helpers  import clean_title, normalize_empty, normalize_year


# ========================
# VERİ MODELLERİ
# ========================

class MainPageResult(BaseModel):
    """Ana sayfa sonucunda dönecek veri modeli."""
    category : str
    title    : str
    url      : str
    poster   : str | None = None
    type     : Literal["movie", "series"] = "movie"

    @model_validator(mode="after")
    def auto_normalize(self) -> MainPageResult:
        self.title  = clean_title(self.title) or self.title
        self.poster = normalize_empty(self.poster)
        return self

class SearchResult(BaseModel):
    """Arama sonucunda dönecek veri modeli."""
    title  : str
    url    : str
    poster : str | None = None
    type   : Literal["movie", "series"] = "movie"
    year   : int | None = None

    @model_validator(mode="after")
    def auto_normalize(self) -> SearchResult:
        self.title  = clean_title(self.title) or self.title
        self.poster = normalize_empty(self.poster)
        return self


class _ItemInfo(BaseModel):
    url            : str
    poster         : str | None = None
    title          : str | None = None
    description    : str | None = None
    tags           : str | None = None
    year           : str | None = None
    content_rating : str | None = None
    trailer        : str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def convert_lists(cls, value):
        return ", ".join(v for v in value if v) if isinstance(value, list) else value

    @field_validator("year", mode="before")
    @classmethod
    def ensure_year(cls, value):
        return normalize_year(value)

    @model_validator(mode="after")
    def auto_normalize(self):
        self.title = clean_title(self.title)

        for field in ("poster", "tags", "description", "content_rating", "trailer"):
            setattr(self, field, normalize_empty(getattr(self, field)))
        return self

class MovieInfo(_ItemInfo):
    """Bir filmin bilgilerini tutan model."""


class Episode(BaseModel):
    season  : int | None = None
    episode : int | None = None
    title   : str | None = None
    url     : str

    @model_validator(mode="after")
    def auto_normalize(self) -> Episode:
        self.title = " ".join((self.title or "").split())
        return self

class SeriesInfo(_ItemInfo):
    """Dizi bilgisi; bölümler sezon/bölüm sırasına göre, URL'ye göre tekrarsız."""
    episodes : list[Episode] = []

    @field_validator("episodes", mode="after")
    @classmethod
    def sort_episodes(cls, value: list[Episode]) -> list[Episode]:
        seen    = set()
        uniques = []
        for ep in value:
            if ep.url not in seen:
                seen.add(ep.url)
                uniques.append(ep)

        return sorted(uniques, key=lambda ep: (ep.season or 0, ep.episode or 0))
