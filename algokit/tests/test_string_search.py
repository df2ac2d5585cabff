import pytest

from algokit.searching.string.kmp import KMPSearch, build_lps
from algokit.searching.string.rabin_karp import RabinKarpSearch


@pytest.mark.parametrize("searcher", [KMPSearch(), RabinKarpSearch()])
@pytest.mark.parametrize(
    "text,pattern",
    [
        ("hello world", "world"),
        ("abracadabra", "cad"),
        ("aaaaab", "aab"),
        ("abcabcabd", "abcabd"),
        ("mississippi", "issip"),
        ("short", "longer pattern"),
        ("abc", "d"),
        ("", "a"),
        ("anything", ""),
        ("", ""),
    ],
)
def test_first_match_agrees_with_str_find(searcher, text, pattern):
    assert searcher.execute(text, pattern) == text.find(pattern)


@pytest.mark.parametrize("searcher", [KMPSearch(), RabinKarpSearch()])
def test_find_all_overlapping(searcher):
    assert searcher.find_all("aaaa", "aa") == [0, 1, 2]
    assert searcher.find_all("abababa", "aba") == [0, 2, 4]
    assert searcher.find_all("abc", "x") == []


def test_build_lps():
    assert build_lps("ababaca") == [0, 0, 1, 2, 3, 0, 1]
    assert build_lps("aaaa") == [0, 1, 2, 3]
    assert build_lps("abcd") == [0, 0, 0, 0]
    assert build_lps("") == []


def test_rabin_karp_survives_hash_collisions():
    # modulus 1 makes every window collide; verification must reject them
    searcher = RabinKarpSearch(modulus=1)
    assert searcher.execute("abcdefg", "efg") == 4
    assert searcher.execute("abcdefg", "xyz") == -1


def test_rabin_karp_rejects_invalid_parameters():
    with pytest.raises(ValueError):
        RabinKarpSearch(base=0)
    with pytest.raises(ValueError):
        RabinKarpSearch(modulus=-7)


def test_unicode_text():
    text = "数据结构与算法"
    assert KMPSearch().execute(text, "算法") == 5
    assert RabinKarpSearch().execute(text, "结构") == 2
