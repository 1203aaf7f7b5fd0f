from services.favorites import FavoriteSet, cookie_header, normalize_club_id


def test_absent_or_empty_cookie_is_empty_set():
    assert len(FavoriteSet.from_cookie(None)) == 0
    assert len(FavoriteSet.from_cookie("")) == 0


def test_add_to_empty_then_again_is_unchanged():
    once = FavoriteSet.from_cookie(None).add("5")
    assert once.to_cookie() == "5"
    twice = once.add("5")
    assert twice == once
    assert twice.to_cookie() == "5"


def test_add_appends_in_insertion_order():
    favorites = FavoriteSet.from_cookie("12,34").add("56")
    assert favorites.to_cookie() == "12,34,56"


def test_remove_present_and_absent():
    favorites = FavoriteSet.from_cookie("12,34,56")
    assert favorites.remove("34").to_cookie() == "12,56"
    assert favorites.remove("99") == favorites
    assert favorites.remove("34").remove("34") == favorites.remove("34")


def test_remove_last_yields_empty_cookie_value():
    assert FavoriteSet.from_cookie("7").remove("7").to_cookie() == ""


def test_cookie_round_trip_ignoring_order():
    ids = {"57", "61", "402", "abc"}
    parsed = FavoriteSet.from_cookie(FavoriteSet.of(ids).to_cookie())
    assert parsed.as_lookup() == frozenset(ids)


def test_parse_drops_empty_segments_and_duplicates():
    favorites = FavoriteSet.from_cookie("1,,2,1,")
    assert favorites.ids == ("1", "2")
    assert "2" in favorites


def test_normalize_club_id():
    assert normalize_club_id(" 42 ") == "42"
    assert normalize_club_id("") is None
    assert normalize_club_id(None) is None
    assert normalize_club_id("1,2") is None
    assert normalize_club_id("1;2") is None
    assert normalize_club_id("\"1\"") is None


def test_parse_drops_segments_that_are_not_cookie_tokens():
    assert FavoriteSet.from_cookie('1,a b,2;x,3').ids == ("1", "3")


def test_cookie_header_keeps_commas_literal():
    header = cookie_header("favorites", FavoriteSet.of(["5", "2"]), max_age=60, path="/")
    assert header.startswith('favorites="5,2";')
    assert "Max-Age=60" in header
    assert "Path=/" in header


def test_cookie_header_single_and_empty_values_are_bare():
    assert cookie_header("favorites", FavoriteSet.of(["5"]), path="/").startswith("favorites=5;")
    assert cookie_header("favorites", FavoriteSet(), path="/").startswith("favorites=;")
