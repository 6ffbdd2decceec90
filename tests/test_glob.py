import pytest

from sushi_shell.glob import compare


@pytest.mark.parametrize(
    "word, pattern",
    [
        ("abc", "abc"),
        ("abc", "a*"),
        ("abc", "*c"),
        ("abc", "*"),
        ("", "*"),
        ("abc", "a?c"),
        ("abc", "???"),
        ("bc", "[ab]c"),
        ("xb", "[!a]b"),
        ("xb", "[^a]b"),
        ("*", "\\*"),
        ("]", "[\\]]"),
        ("a.txt", "*.txt"),
        ("@(ab)", "@(ab)"),
    ],
)
def test_plain_matches(word, pattern):
    assert compare(word, pattern, False)


@pytest.mark.parametrize(
    "word, pattern",
    [
        ("abc", "abd"),
        ("abc", "a?"),
        ("abc", "b*"),
        ("ac", "[!a]c"),
        ("a", "\\*"),
        ("", "?"),
        ("a", "a[!b]"),
        ("cc", "[ab]c"),
        ("a.txt", "*.md"),
    ],
)
def test_plain_mismatches(word, pattern):
    assert not compare(word, pattern, False)


@pytest.mark.parametrize(
    "word, pattern",
    [
        ("cd", "@(ab|cd)"),
        ("ab", "@(ab|cd)"),
        ("b", "?(a)b"),
        ("ab", "?(a)b"),
        ("abab", "+(ab)"),
        ("ababc", "*(ab)c"),
        ("c", "*(ab)c"),
        ("b", "!(a)"),
        ("x.c", "*.@(c|h)"),
    ],
)
def test_extglob_matches(word, pattern):
    assert compare(word, pattern, True)


@pytest.mark.parametrize(
    "word, pattern",
    [
        ("ef", "@(ab|cd)"),
        ("aab", "?(a)b"),
        ("", "+(ab)"),
        ("a", "!(a)"),
        ("x.o", "*.@(c|h)"),
    ],
)
def test_extglob_mismatches(word, pattern):
    assert not compare(word, pattern, True)


def test_extglob_off_treats_prefix_literally():
    assert not compare("ab", "@(ab)", False)
    assert compare("ab", "@(ab)", True)


def test_unterminated_bracket_is_literal():
    assert compare("[a", "[a", False)
    assert not compare("a", "[a", False)


@pytest.mark.parametrize("word", ["", "a", "hello world", "x*y?"])
def test_star_matches_everything(word):
    assert compare(word, "*", False)
    assert compare(word, "*", True)