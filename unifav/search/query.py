"""Query construction and criteria validation for directory searches."""

from dataclasses import dataclass
from typing import List, Optional, Tuple
from urllib.parse import quote

from unifav.errors import ValidationError
from unifav.utils.config import settings

# Characters encodeURIComponent leaves untouched.
_UNRESERVED = "-_.!~*'()"


@dataclass(frozen=True)
class Query:
    """Trimmed search criteria; at least one of the two is set."""

    country: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self):
        if not self.country and not self.name:
            raise ValidationError("no criteria")

    @property
    def params(self) -> List[Tuple[str, str]]:
        """Raw (unencoded) parameters, country first."""
        pairs = []
        if self.country:
            pairs.append(("country", self.country))
        if self.name:
            pairs.append(("name", self.name))
        return pairs

    @property
    def query_string(self) -> str:
        return "&".join(f"{key}={quote(value, safe=_UNRESERVED)}" for key, value in self.params)

    def url(self, base_url: str) -> str:
        return f"{base_url}?{self.query_string}"


def build_query(
    country: Optional[str],
    university_name: Optional[str],
    max_length: Optional[int] = None,
) -> Query:
    """Trim both criteria and build a ``Query``.

    Raises ``ValidationError`` when both are blank or either is too long.
    """
    country = (country or "").strip()
    university_name = (university_name or "").strip()
    if not country and not university_name:
        raise ValidationError("no criteria")

    limit = max_length if max_length is not None else settings.max_criteria_length
    for label, value in (("country", country), ("university name", university_name)):
        if len(value) > limit:
            raise ValidationError(f"{label} exceeds max length ({limit} chars)")

    return Query(country=country or None, name=university_name or None)
