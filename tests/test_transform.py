import pytest

from ftkit.transform import (
    Tokenizer,
    count_words,
    is_delim,
    iter_indexed,
    join,
    map_indexed,
    split,
    substr,
    tokenize,
    trim,
)


def test_split_sentence():
    text = "Hello world, this is a test string"
    assert split(text, " ") == ["Hello", "world,", "this", "is", "a", "test", "string"]


@pytest.mark.parametrize("text", ["", ",,,", ","])
def test_split_without_words(text):
    assert split(text, ",") == []


def test_split_drops_repeated_separators():
    assert split(",,ab,,cd,", ",") == ["ab", "cd"]


@pytest.mark.parametrize("text", ["", "a", "  a  bb c  ", "xx", "one,two,,three"])
@pytest.mark.parametrize("sep", [" ", ",", "x"])
def test_count_words_matches_split(text, sep):
    assert count_words(text, sep) == len(split(text, sep))


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_join():
    assert join("foo", "bar") == "foobar"
    assert join("", "bar") == "bar"


def test_join_rejects_none():
    with pytest.raises(TypeError):
        join(None, "x")


def test_trim_both_ends():
    assert trim("xyhixyx", "xy") == "hi"


def test_trim_everything():
    assert trim("xxxx", "x") == ""
    assert trim("", "x") == ""


def test_trim_empty_set_keeps_text():
    assert trim(" a ", "") == " a "


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 10, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_map_indexed_identity_and_indices():
    seen = []

    def record(i, c):
        seen.append((i, c))
        return c

    assert map_indexed("abc", record) == "abc"
    assert seen == list(enumerate("abc"))


def test_map_indexed_transforms():
    assert map_indexed("abc", lambda i, c: c.upper()) == "ABC"


def test_iter_indexed_replaces_in_place():
    chars = list("abc")
    iter_indexed(chars, lambda i, c: c.upper() if i != 1 else None)
    assert chars == ["A", "b", "C"]


def test_iter_indexed_on_str_cannot_modify():
    with pytest.raises(TypeError):
        iter_indexed("abc", lambda i, c: c.upper())


def test_is_delim():
    assert is_delim("-", " -!")
    assert not is_delim("a", " -!")
    with pytest.raises(ValueError):
        is_delim("", " -")


def test_tokenize_example():
    text = "here !a s&-i|<\tmple test"
    delimiters = " -!&>\t<|"
    assert list(tokenize(text, delimiters)) == ["here", "a", "s", "i", "mple", "test"]


def test_tokenize_only_delimiters():
    assert list(tokenize("  ,, ", " ,")) == []


def test_tokenizer_exhaustion():
    tok = Tokenizer("a b")
    assert tok.next_token(" ") == "a"
    assert tok.next_token(" ") == "b"
    assert tok.next_token(" ") is None
    assert tok.next_token(" ") is None


def test_tokenizer_changing_delimiters():
    tok = Tokenizer("a,b c,d")
    assert tok.next_token(",") == "a"
    assert tok.next_token(" ") == "b"
    assert tok.next_token(",") == "c"
    assert tok.next_token(",") == "d"


def test_tokenizer_empty_delimiters_returns_rest():
    tok = Tokenizer("abc def")
    assert tok.next_token("") == "abc def"
    assert tok.next_token(" ") is None