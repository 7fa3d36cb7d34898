"""Favorite records -- the minimal persisted unit (name + canonical web page)."""

from dataclasses import dataclass
from typing import Any, Dict

from unifav.errors import NoWebPageError
from unifav.search.records import UniversityRecord


@dataclass(frozen=True)
class FavoriteRecord:
    name: str
    web_page: str

    @classmethod
    def from_university(cls, university: UniversityRecord) -> "FavoriteRecord":
        """Take the name and first web page; raise ``NoWebPageError`` if there is none."""
        web_page = university.first_web_page
        if web_page is None:
            raise NoWebPageError(university.name)
        return cls(name=university.name, web_page=web_page)

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "web_page": self.web_page}

    @classmethod
    def from_dict(cls, item: Any) -> "FavoriteRecord":
        if not isinstance(item, dict):
            raise ValueError(f"expected an object, got {type(item).__name__}")
        name, web_page = item.get("name"), item.get("web_page")
        if not isinstance(name, str) or not isinstance(web_page, str):
            raise ValueError("favorite is missing 'name' or 'web_page'")
        return cls(name=name, web_page=web_page)
