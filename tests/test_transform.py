import pytest

from fdlines.chars import to_upper
from fdlines.transform import strjoin, strlcat, strmap, strmapi, strsplit, strsub, strtrim


def test_strlcat_fits():
    dst, src = "abc", "def"
    result, length = strlcat(dst, src, 10)
    assert result == dst + src
    assert length == len(dst) + len(src)


def test_strlcat_truncates_leaving_room_for_terminator():
    dst, src = "abc", "def"
    result, length = strlcat(dst, src, 5)
    assert result == (dst + src)[:4]
    assert length == len(dst) + len(src)


def test_strlcat_zero_size_leaves_dst():
    assert strlcat("", "xyz", 0) == ("", 3)


def test_strlcat_full_buffer_leaves_dst():
    dst = "abcd"
    assert strlcat(dst, "ef", 4) == (dst, len(dst) + 2)


def test_strlcat_dst_longer_than_size():
    dst, src = "abcdef", "gh"
    result, length = strlcat(dst, src, 3)
    assert result == dst
    assert length == 3 + len(src)


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


@pytest.mark.parametrize("start,length", [(0, 0), (0, 5), (2, 3), (5, 10), (11, 0)])
def test_strsub_is_a_slice(start, length):
    s = "hello world"
    part = strsub(s, start, length)
    assert part == s[start:start + length]
    assert len(part) <= length


def test_strsub_start_past_end():
    with pytest.raises(IndexError):
        strsub("abc", 4, 1)


def test_strsub_negative():
    with pytest.raises(ValueError):
        strsub("abc", -1, 1)


def test_strjoin_concatenates():
    a, b = "foo", "bar"
    joined = strjoin(a, b)
    assert joined.startswith(a) and joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_strips_both_ends():
    assert strtrim("  \t hello world \n") == "hello world"


def test_strtrim_only_whitespace():
    assert strtrim(" \n\t ") == ""


def test_strtrim_keeps_other_whitespace():
    s = "\vx\v"
    assert strtrim(s) == s


def test_strsplit_drops_empty_words():
    assert strsplit("*hello*fellow***students*", "*") == ["hello", "fellow", "students"]


def test_strsplit_empty_and_no_delimiter():
    assert strsplit("", "*") == []
    assert strsplit("word", "*") == ["word"]
    assert strsplit("****", "*") == []


def test_strsplit_bad_delimiter():
    with pytest.raises(ValueError):
        strsplit("a,b", ",,")


def test_strmap_applies_function():
    s = "mixed Case 123"
    assert strmap(s, to_upper) == s.upper()


def test_strmapi_passes_indexes():
    calls = []

    def record(i, ch):
        calls.append((i, ch))
        return ch

    s = "abcd"
    assert strmapi(s, record) == s
    assert calls == list(enumerate(s))