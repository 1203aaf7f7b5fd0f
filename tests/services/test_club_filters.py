from models import Club
from services.club_filters import FilterCriteria, filter_clubs

ARSENAL = Club(id=1, name="Arsenal", short_name="Arsenal", founded=1886)
CHELSEA = Club(id=2, name="Chelsea", short_name="Chelsea", founded=1905)
CLUBS = [
    ARSENAL,
    CHELSEA,
    Club(id=3, name="Manchester United FC", short_name="Man United", tla="MUN", founded=1878),
    Club(id=4, name="Nowhere Athletic", short_name="Nowhere"),
]


def test_empty_criteria_returns_input_unchanged():
    result = filter_clubs(CLUBS, FilterCriteria())
    assert result == CLUBS
    assert FilterCriteria().is_empty


def test_search_is_case_insensitive():
    criteria = FilterCriteria.build(search="ARSENAL")
    assert filter_clubs(CLUBS[:2], criteria) == [ARSENAL]
    assert criteria.search == "arsenal"


def test_search_matches_short_name_and_tla():
    assert [c.id for c in filter_clubs(CLUBS, FilterCriteria.build(search="man u"))] == [3]
    assert [c.id for c in filter_clubs(CLUBS, FilterCriteria.build(search="mun"))] == [3]


def test_min_year_excludes_older_clubs():
    assert filter_clubs(CLUBS[:2], FilterCriteria.build(min_year="1900")) == [CHELSEA]


def test_year_bounds_are_inclusive():
    criteria = FilterCriteria.build(min_year="1886", max_year="1905")
    assert [c.id for c in filter_clubs(CLUBS, criteria)] == [1, 2]


def test_unknown_founding_year_compares_as_zero():
    # founded=0 fails any positive lower bound and passes any upper bound
    assert 4 not in [c.id for c in filter_clubs(CLUBS, FilterCriteria.build(min_year="1800"))]
    assert 4 in [c.id for c in filter_clubs(CLUBS, FilterCriteria.build(max_year="1880"))]


def test_non_numeric_year_bounds_are_ignored():
    criteria = FilterCriteria.build(min_year="abc", max_year="19.5")
    assert criteria.min_year is None and criteria.max_year is None
    assert criteria.min_year_text == "abc"
    assert filter_clubs(CLUBS, criteria) == CLUBS


def test_signed_year_parses_like_an_integer():
    assert FilterCriteria.build(min_year="+1900").min_year == 1900
    assert FilterCriteria.build(min_year=" 1900").min_year is None


def test_from_args_reads_query_names():
    criteria = FilterCriteria.from_args({"search": "Che", "minYear": "1900", "maxYear": ""})
    assert criteria.search == "che"
    assert criteria.min_year == 1900
    assert criteria.max_year is None


def test_empty_criteria_returns_a_copy():
    result = filter_clubs(iter(CLUBS), FilterCriteria.build("", "", ""))
    assert result == CLUBS
    assert result is not CLUBS
