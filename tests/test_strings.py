import pytest

from algokit.strings import (
    SuffixTrie,
    brute_force_search,
    infix_to_postfix,
    is_palindrome,
    is_valid_brackets,
    kmp_search,
    precedence,
    prefix_function,
    substring_search,
)


def _all_occurrences(pattern, text):
    found, start = [], text.find(pattern)
    while start != -1:
        found.append(start)
        start = text.find(pattern, start + 1)
    return found


def test_precedence_ordering():
    assert precedence("^") > precedence("*") == precedence("/")
    assert precedence("/") > precedence("+") == precedence("-")
    assert precedence("-") > precedence("a") == precedence("(")


@pytest.mark.parametrize(
    "infix,postfix",
    [("a+b*c", "abc*+"), ("(a+b)*c", "ab+c*"), ("a^b^c", "ab^c^")],
)
def test_infix_to_postfix(infix, postfix):
    assert infix_to_postfix(infix) == postfix


def test_infix_to_postfix_keeps_operands_in_order():
    result = infix_to_postfix("x*(y+z)-w/v")
    assert [ch for ch in result if ch.isalpha()] == list("xyzwv")
    assert sorted(ch for ch in result if not ch.isalpha()) == sorted("*+-/")


def test_prefix_function_invariant():
    for pattern in ["ABABCABAB", "AAAA", "abcab", "a", "aabaaab"]:
        lps = prefix_function(pattern)
        assert len(lps) == len(pattern)
        assert lps[0] == 0
        for i, length in enumerate(lps):
            assert length <= i
            assert pattern[:length] == pattern[i + 1 - length : i + 1]


def test_prefix_function_empty():
    assert prefix_function("") == []


@pytest.mark.parametrize(
    "pattern,text",
    [("ABABCABAB", "ABABDABACDABABCABAB"), ("aa", "aaaaa"), ("xyz", "abc"), ("abc", "abc"), ("a", "banana")],
)
def test_kmp_matches_find(pattern, text):
    assert kmp_search(pattern, text) == _all_occurrences(pattern, text)


def test_kmp_rejects_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("", "abc")


@pytest.mark.parametrize("word", ["", "a", "abba", "racecar", "abc", "ab"])
def test_is_palindrome(word):
    assert is_palindrome(word + word[::-1]) is True
    assert is_palindrome(word) is (list(word) == list(reversed(word)))


@pytest.mark.parametrize(
    "text,expected",
    [("()", True), ("()[]{}", True), ("{[()]}", True), ("(]", False), ("([)]", False), ("(", False), ("", True), ("a", False)],
)
def test_is_valid_brackets(text, expected):
    assert is_valid_brackets(text) is expected


def test_brute_force_search_finds_first_match():
    assert brute_force_search("abcabcx", "bca") == "abcabcx".find("bca")
    assert brute_force_search("abcdef", "zz") is None


def test_suffix_trie_contains_all_substrings():
    text = "banana"
    trie = SuffixTrie(text)
    for i in range(len(text)):
        for j in range(i, len(text) + 1):
            assert trie.contains(text[i:j])
    assert not trie.contains("nab")
    assert "ana" in trie


def test_suffix_trie_insert_words():
    trie = SuffixTrie()
    trie.insert("hello")
    assert trie.contains("hel")
    assert not trie.contains("help")


@pytest.mark.parametrize(
    "text,pattern",
    [("abracadabra", "cad"), ("abracadabra", "dab"), ("abracadabra", "abra"), ("mississippi", "ssip"), ("mississippi", "spi")],
)
def test_substring_search_matches_in(text, pattern):
    assert substring_search(text, pattern) is (pattern in text)