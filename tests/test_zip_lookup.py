import pytest

from errors import InvalidZipError
from services.zip_lookup import (
    districts_for_zip,
    is_known_prefix,
    normalize_zip,
    state_for_zip,
    state_from_address,
    zip_from_address,
)


@pytest.mark.parametrize(
    "zipcode, state",
    [
        ("10001", "NY"),
        ("02108", "MA"),
        ("05401", "VT"),
        ("20500", "DC"),
        ("73301", "TX"),
        ("73102", "OK"),
        ("94103", "CA"),
        ("99501", "AK"),
        ("00601", "PR"),
    ],
)
def test_mapped_prefix_returns_state(zipcode, state):
    assert is_known_prefix(zipcode)
    assert state_for_zip(zipcode) == state


@pytest.mark.parametrize("zipcode", ["00123", "21300", "34300", "09001"])
def test_unmapped_prefix_defaults_to_ca(zipcode):
    assert not is_known_prefix(zipcode)
    assert state_for_zip(zipcode) == "CA"


def test_default_state_is_configurable(monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "default_state", "TX")
    assert state_for_zip("00123") == "TX"


@pytest.mark.parametrize(
    "raw, expected",
    [("10001", "10001"), (" 10001 ", "10001"), ("10001-1234", "10001"), ("100011234", "10001")],
)
def test_normalize_zip(raw, expected):
    assert normalize_zip(raw) == expected


@pytest.mark.parametrize("raw", ["", "1234", "123456", "00000", "abcde"])
def test_normalize_zip_rejects_bad_input(raw):
    with pytest.raises(InvalidZipError) as exc_info:
        normalize_zip(raw)
    assert exc_info.value.status_code == 400


def test_districts_for_metro_prefix():
    assert districts_for_zip("10001") == [12, 10, 13]


def test_at_large_state_is_district_zero():
    assert districts_for_zip("05401") == [0]
    assert districts_for_zip("99501") == [0]


def test_districts_unknown():
    assert districts_for_zip("12207") == []
    assert districts_for_zip("00123") == []


def test_state_from_address_prefers_uppercase_code():
    assert state_from_address("123 Main St, Springfield, IL 62701") == "IL"
    # "IN" the word must not beat the trailing code
    assert state_from_address("Suite 4 IN Tower, Portland, OR 97201") == "OR"


def test_state_from_address_uses_zip():
    assert state_from_address("1 Beacon Street, Boston 02108") == "MA"


def test_state_from_address_full_name():
    assert state_from_address("400 Capitol St, Charleston, West Virginia") == "WV"


def test_state_from_address_lowercase_code():
    assert state_from_address("10 elm st, austin, tx") == "TX"


def test_state_from_address_none():
    assert state_from_address("somewhere over the rainbow") is None


def test_zip_from_address():
    assert zip_from_address("1600 Pennsylvania Ave NW, Washington, DC 20500-0003") == "20500"
    assert zip_from_address("no zip here") is None


def test_state_from_address_northeast_quadrant_uses_zip():
    assert state_from_address("100 Maryland Ave NE, 20002") == "DC"
    assert state_from_address("200 Constitution Ave. NE, Washington 20515") == "DC"


def test_state_from_address_nebraska_code_still_wins():
    assert state_from_address("1445 K St, Lincoln, NE 68508") == "NE"
    assert state_from_address("100 Maryland Ave NE, Washington, DC 20002") == "DC"
