import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.transform import (
    split,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    striteri,
    strtrim,
    substr,
)

text = st.text(alphabet=st.characters(blacklist_characters="\0"), max_size=40)

DIGITS = "0123456789"


# substr

@pytest.mark.parametrize(
    "start,length,expected",
    [
        (0, 10, DIGITS),
        (0, 0, ""),
        (0, 1, "0"),
        (0, 2, "01"),
        (9, 2, "9"),
        (0, 1234, DIGITS),
        (0, 2**64 - 1, DIGITS),
    ],
)
def test_substr_source_cases(start, length, expected):
    assert substr(DIGITS, start, length) == expected


def test_substr_start_past_end_is_empty():
    assert substr(DIGITS, 10, 5) == ""
    assert substr(DIGITS, 100, 5) == ""


def test_substr_none():
    assert substr(None, 0, 3) is None


def test_substr_stops_at_nul():
    assert substr("ab\0cd", 0, 10) == "ab"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr(DIGITS, -1, 2)
    with pytest.raises(ValueError):
        substr(DIGITS, 0, -2)


@given(text, st.integers(0, 50), st.integers(0, 50))
def test_substr_is_bounded_slice(s, start, length):
    result = substr(s, start, length)
    assert len(result) <= length
    assert result in s
    if result:
        assert s.startswith(result, start)


# strjoin

def test_strjoin_source_case():
    assert strjoin("42", "Tokyo") == "42Tokyo"


def test_strjoin_none():
    assert strjoin(None, None) is None
    assert strjoin("a", None) is None
    assert strjoin(None, "b") is None


@given(text, text)
def test_strjoin_round_trip(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


# strtrim

def test_strtrim_source_case():
    s1 = "aaaabbbbbabaa42tokyoaaaaa42ataobbbakayaoaaaaaaaaaaaaaaaaaaaa"
    assert strtrim(s1, "aaabbbbb2b") == "42tokyoaaaaa42ataobbbakayao"


def test_strtrim_everything_trimmed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  hi  ", "") == "  hi  "


def test_strtrim_none():
    assert strtrim(None, "a") is None
    assert strtrim("a", None) is None


@given(text, text)
def test_strtrim_invariants(s, charset):
    result = strtrim(s, charset)
    assert result in s
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset


# split

def test_split_source_cases():
    assert split("Hello World", " ") == ["Hello", "World"]
    assert split("Hello                             World", " ") == ["Hello", "World"]
    assert split("       Leading and trailing spaces       ", " ") == [
        "Leading",
        "and",
        "trailing",
        "spaces",
    ]
    assert split("            ", " ") == []
    assert split("JustOneWord", " ") == ["JustOneWord"]
    assert split("", " ") == []
    assert split(None, " ") == []
    assert split("aaaaaaa", "a") == []


def test_split_on_nul_gives_first_word():
    assert split("Split\0by\0null", "\0") == ["Split"]
    assert split("Split\0by\0null", 0) == ["Split"]


def test_split_accepts_integer_delimiter():
    assert split("a,b", ord(",")) == ["a", "b"]


def test_split_rejects_long_delimiter():
    with pytest.raises(TypeError):
        split("a,b", ",,")


@given(text, st.sampled_from([" ", ",", "a"]))
def test_split_invariants(s, sep):
    parts = split(s, sep)
    assert all(part and sep not in part for part in parts)
    assert "".join(parts) == s.replace(sep, "")


# strmapi

def test_strmapi_source_case():
    assert strmapi("01234", lambda i, c: chr(ord(c) + i)) == "02468"


def test_strmapi_none():
    assert strmapi(None, lambda i, c: c) is None
    assert strmapi("abc", None) is None


def test_strmapi_bad_result_raises():
    with pytest.raises(TypeError):
        strmapi("abc", lambda i, c: c * 2)


@given(text)
def test_strmapi_identity(s):
    assert strmapi(s, lambda i, c: c) == s


# striteri

def test_striteri_source_cases():
    def plus_idx(i, c):
        return chr(ord(c) + i)

    empty = []
    striteri(empty, plus_idx)
    assert empty == []

    single = list("0")
    striteri(single, plus_idx)
    assert "".join(single) == "0"

    nine = list("000000000")
    striteri(nine, plus_idx)
    assert "".join(nine) == "012345678"


def test_striteri_stops_at_nul():
    chars = list("aa\0aa")
    striteri(chars, lambda i, c: "z")
    assert "".join(chars) == "zz\0aa"


def test_striteri_bytearray():
    data = bytearray(b"abc")
    striteri(data, lambda i, b: b - 32)
    assert data == bytearray(b"ABC")


def test_striteri_none_return_keeps_item():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert chars == list("xyz")
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


# strlcpy

def test_strlcpy_source_case():
    assert strlcpy("aiueo", 10) == ("aiueo", len("aiueo"))


def test_strlcpy_truncates():
    assert strlcpy("aiueo", 3) == ("ai", len("aiueo"))


def test_strlcpy_zero_size():
    assert strlcpy("aiueo", 0) == ("", len("aiueo"))


def test_strlcpy_none():
    assert strlcpy(None, 5) == ("", 0)


@given(text, st.integers(1, 60))
def test_strlcpy_invariants(src, size):
    copied, length = strlcpy(src, size)
    assert length == len(src)
    assert len(copied) <= size - 1
    assert src.startswith(copied)


# strlcat

@pytest.mark.parametrize(
    "dst,src,size",
    [("abc", "def", 20), ("", "xyz", 20), ("abc", "", 20), ("abc", "de", 6)],
)
def test_strlcat_fits(dst, src, size):
    result, length = strlcat(dst, src, size)
    assert result == dst + src
    assert length == len(dst) + len(src)


def test_strlcat_truncates():
    result, length = strlcat("abc", "defgh", 8)
    assert result == "abcdefg"
    assert length == len("abc") + len("defgh")


@pytest.mark.parametrize(
    "dst,src,size",
    [("", "abc", 0), ("abcdef", "ghi", 6), ("abcde", "f", 5)],
)
def test_strlcat_no_room(dst, src, size):
    result, length = strlcat(dst, src, size)
    assert result == dst
    assert length == size + len(src)


def test_strlcat_one_slot_left_for_nul():
    result, length = strlcat("abcde", "f", 6)
    assert result == "abcde"
    assert length == len("abcde") + len("f")


def test_strlcat_none():
    assert strlcat(None, "a", 5) == (None, 0)
    assert strlcat("a", None, 5) == ("a", 0)


def test_strlcat_negative_size_raises():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


@given(text, text, st.integers(0, 100))
def test_strlcat_invariants(dst, src, size):
    result, length = strlcat(dst, src, size)
    assert result.startswith(dst)
    assert (result[len(dst):] == "") or src.startswith(result[len(dst):])
    if size > len(dst):
        assert len(result) <= size - 1
        assert length == len(dst) + len(src)
    else:
        assert result == dst
        assert length == size + len(src)