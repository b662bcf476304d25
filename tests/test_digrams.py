import pytest

from playfair.classical.common import pick_filler
from playfair.classical.digrams import pair_letters, split_with_filler, strip_fillers
from playfair.core.utils import normalize_text


def test_normalize_text():
    assert normalize_text("Hello, World 123!") == "HELLOWORLD"
    assert normalize_text("jump") == "IUMP"
    assert normalize_text("") == ""


@pytest.mark.parametrize(
    "letters,expected",
    [
        ("", []),
        ("A", ["AX"]),
        ("X", ["XQ"]),
        ("AB", ["AB"]),
        ("BALLOON", ["BA", "LX", "LO", "ON"]),
        ("HELLO", ["HE", "LX", "LO"]),
        ("XX", ["XQ", "XQ"]),
        ("MISSISSIPPI", ["MI", "SX", "SI", "SX", "SI", "PX", "PI"]),
    ],
)
def test_split_with_filler(letters, expected):
    assert split_with_filler(letters) == expected


def test_filler_never_matches_its_letter():
    for d in split_with_filler("XXAXXBBQQ"):
        assert len(d) == 2
        assert d[0] != d[1]


def test_pick_filler():
    assert pick_filler("A") == "X"
    assert pick_filler("X") == "Q"


def test_custom_fillers():
    assert split_with_filler("LLZZ", filler="Z", fallback="K") == ["LZ", "LZ", "ZK"]


@pytest.mark.parametrize("filler,fallback", [("J", "Q"), ("XX", "Q"), ("X", "X"), ("1", "Q")])
def test_bad_fillers_rejected(filler, fallback):
    with pytest.raises(ValueError):
        split_with_filler("AB", filler=filler, fallback=fallback)


def test_pair_letters():
    assert pair_letters("") == []
    assert pair_letters("CFSUPM") == ["CF", "SU", "PM"]


def test_pair_letters_rejects_odd_length():
    with pytest.raises(ValueError, match="even number"):
        pair_letters("ABC")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("HELXLO", "HELLO"),
        ("BALXLOON", "BALLOON"),
        ("AX", "A"),
        ("XQ", "X"),
        ("AXBX", "AXB"),
        ("", ""),
    ],
)
def test_strip_fillers(text, expected):
    assert strip_fillers(text) == expected
