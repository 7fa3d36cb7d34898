"""University records as returned by the remote directory."""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple


@dataclass(frozen=True)
class UniversityRecord:
    """A single directory entry (read-only)."""

    name: str
    country: str
    country_code: str
    state_province: Optional[str]
    domains: Tuple[str, ...]
    web_pages: Tuple[str, ...]

    @property
    def first_web_page(self) -> Optional[str]:
        """The canonical web page, or None when the record has none."""
        if self.web_pages and self.web_pages[0]:
            return self.web_pages[0]
        return None

    @classmethod
    def from_json(cls, item: Any) -> "UniversityRecord":
        """Build a record from one decoded JSON object.

        Raises ``ValueError`` when the object does not have the directory's
        shape.
        """
        if not isinstance(item, dict):
            raise ValueError(f"expected an object, got {type(item).__name__}")

        name = item.get("name")
        country = item.get("country")
        if not isinstance(name, str) or not isinstance(country, str):
            raise ValueError("record is missing 'name' or 'country'")

        code = item.get("alpha_two_code") or ""
        state = item.get("state-province")
        if not isinstance(code, str) or (state is not None and not isinstance(state, str)):
            raise ValueError(f"record {name!r} has invalid country code or state")

        return cls(
            name=name,
            country=country,
            country_code=code,
            state_province=state,
            domains=_string_tuple(item, "domains", name),
            web_pages=_string_tuple(item, "web_pages", name),
        )


def parse_records(payload: Any) -> List[UniversityRecord]:
    """Parse a decoded response body into records, preserving order."""
    if not isinstance(payload, list):
        raise ValueError(f"expected a JSON array, got {type(payload).__name__}")
    return [UniversityRecord.from_json(item) for item in payload]


def _string_tuple(item: dict, key: str, name: str) -> Tuple[str, ...]:
    value = item.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"record {name!r} has a non-string-array '{key}'")
    return tuple(value)
