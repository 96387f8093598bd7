import pytest

from airports import airport_codes, find_airport, find_best_match, load_airports


def test_load_airports(airports_csv):
    df = load_airports(airports_csv)
    assert list(df["ident"]) == ["EGLL", "KJFK", "LFPG", "LFPO", "XXXX"]


def test_codes_prefer_iata(airports_df):
    assert list(airport_codes(airports_df)) == ["LHR", "JFK", "CDG", "ORY", "XXXX"]


def test_find_by_ident_and_iata(airports_df):
    lhr = find_airport(airports_df, "EGLL")
    assert (lhr.code, lhr.city, lhr.type) == ("LHR", "London", "large_airport")
    assert lhr.lat == pytest.approx(51.4706)
    assert find_airport(airports_df, " jfk ").code == "JFK"


def test_find_without_iata(airports_df):
    assert find_airport(airports_df, "XXXX").code == "XXXX"


def test_find_unknown(airports_df):
    with pytest.raises(ValueError):
        find_airport(airports_df, "ZZZZ")


def test_best_match_exact_code(airports_df):
    assert find_best_match("lhr", airports_df).code == "LHR"


def test_best_match_code_prefix_beats_name(airports_df):
    # every name contains "or" (airport); only ORY starts with it
    assert find_best_match("or", airports_df).code == "ORY"


def test_best_match_prefers_large_airports(airports_df):
    assert find_best_match("Paris", airports_df).code == "CDG"


def test_best_match_city(airports_df):
    assert find_best_match("new york", airports_df).code == "JFK"


@pytest.mark.parametrize("query", ["", "a", "zzzz"])
def test_best_match_none(airports_df, query):
    assert find_best_match(query, airports_df) is None
