"""Unit tests for university/favorite records and reconciliation."""

import pytest

from unifav.errors import NoWebPageError, ValidationError
from unifav.favorites.reconcile import mark_favorites
from unifav.favorites.records import FavoriteRecord
from unifav.search.records import UniversityRecord, parse_records

USP_JSON = {
    "name": "Universidade de São Paulo",
    "country": "Brazil",
    "alpha_two_code": "BR",
    "state-province": "São Paulo",
    "domains": ["usp.br"],
    "web_pages": ["http://www.usp.br/"],
}


def test_from_json_full_record():
    uni = UniversityRecord.from_json(USP_JSON)
    assert uni.name == "Universidade de São Paulo"
    assert uni.country_code == "BR"
    assert uni.state_province == "São Paulo"
    assert uni.domains == ("usp.br",)
    assert uni.first_web_page == "http://www.usp.br/"


def test_optional_fields_default():
    uni = UniversityRecord.from_json({"name": "X", "country": "Y"})
    assert uni.country_code == ""
    assert uni.state_province is None
    assert uni.domains == ()
    assert uni.web_pages == ()
    assert uni.first_web_page is None


def test_empty_first_web_page_counts_as_missing():
    uni = UniversityRecord.from_json({**USP_JSON, "web_pages": [""]})
    assert uni.first_web_page is None


@pytest.mark.parametrize(
    "item",
    [
        "a string",
        {"country": "Brazil"},
        {**USP_JSON, "name": None},
        {**USP_JSON, "web_pages": "http://www.usp.br/"},
        {**USP_JSON, "domains": [1, 2]},
        {**USP_JSON, "state-province": 3},
    ],
)
def test_malformed_items(item):
    with pytest.raises(ValueError):
        UniversityRecord.from_json(item)


def test_parse_records_preserves_order():
    other = {**USP_JSON, "name": "UFRJ", "web_pages": ["http://www.ufrj.br/"]}
    records = parse_records([USP_JSON, other])
    assert [r.name for r in records] == ["Universidade de São Paulo", "UFRJ"]


def test_parse_records_requires_array():
    with pytest.raises(ValueError):
        parse_records({"results": []})


class TestFavoriteRecord:
    def test_from_university(self):
        fav = FavoriteRecord.from_university(UniversityRecord.from_json(USP_JSON))
        assert fav == FavoriteRecord(name="Universidade de São Paulo", web_page="http://www.usp.br/")

    def test_from_university_without_web_page(self):
        uni = UniversityRecord.from_json({**USP_JSON, "web_pages": []})
        with pytest.raises(NoWebPageError) as exc:
            FavoriteRecord.from_university(uni)
        assert isinstance(exc.value, ValidationError)
        assert exc.value.name == "Universidade de São Paulo"

    def test_dict_round_trip(self):
        fav = FavoriteRecord(name="A", web_page="a.edu")
        assert FavoriteRecord.from_dict(fav.to_dict()) == fav


def test_mark_favorites():
    with_page = UniversityRecord.from_json(USP_JSON)
    other = UniversityRecord.from_json({**USP_JSON, "name": "B", "web_pages": ["b.edu"]})
    no_page = UniversityRecord.from_json({**USP_JSON, "name": "C", "web_pages": []})
    favorites = [FavoriteRecord(name="USP", web_page="http://www.usp.br/")]

    marked = mark_favorites([with_page, other, no_page], favorites)
    assert marked == [(with_page, True), (other, False), (no_page, False)]
