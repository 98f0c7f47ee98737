"""Tests for prompt normalization."""

import pytest

from fishcomplete.normalizer import normalize, split_words, strip_sentinel, tokenize


def test_sudo_with_flag_value():
    assert normalize("sudo -u root apt install") == "apt install"


def test_env_assignment():
    assert normalize("env LC_ALL=C ls") == "ls"


def test_parent_alone():
    assert normalize("sudo") == "sudo"
    assert normalize("sudo -E") == "sudo -E"
    assert normalize("env A=1") == "env A=1"


def test_sentinel():
    assert normalize("*ls") == "ls"
    assert normalize("  *ls -l") == "ls -l"


def test_sentinel_only_once():
    assert strip_sentinel("*ls *.txt") == "ls *.txt"


def test_sentinel_disabled():
    assert normalize("*ls", sentinel_pattern="") == "*ls"


def test_custom_sentinel():
    assert normalize("!git chec", sentinel_pattern=r"^\s*!") == "git chec"


def test_trailing_space_preserved():
    assert normalize("sudo ls ") == "ls "
    assert normalize("env LC_ALL=C ls ") == "ls "
    assert normalize("git ") == "git "
    assert normalize("git") == "git"


def test_sudo_space_completes_commands():
    """Nothing typed after the wrapper: complete a command name."""
    assert normalize("sudo ") == ""


def test_flag_value_being_typed():
    """The value of `-u` is left to the shell completing sudo itself."""
    assert normalize("sudo -u ro") == "sudo -u ro"
    assert normalize("sudo -u ") == "sudo -u "


def test_mixed_wrapper_arguments():
    assert normalize("sudo -E env FOO=bar -i make") == "env FOO=bar -i make"
    assert normalize("env -i PATH=/bin -u HOME git st") == "git st"


def test_not_a_parent():
    assert normalize("git chec") == "git chec"
    assert normalize("  ls  -l") == "  ls  -l"
    assert normalize("") == ""
    assert normalize("   ") == "   "


@pytest.mark.parametrize("prompt", ["git chec", "ls -", "*ls", "  make ", "grep -r foo=bar "])
def test_idempotence(prompt):
    once = normalize(prompt)
    assert normalize(once) == once


def test_tokenize():
    assert tokenize("ls") == ["ls"]
    assert tokenize("ls ") == ["ls", ""]
    assert tokenize("  ls   -l\t") == ["ls", "-l", ""]
    assert tokenize("") == []
    assert tokenize("  ") == []
    assert tokenize("echo 'a b' c\\ d") == ["echo", "a b", "c d"]
    assert tokenize("ls my\\ ") == ["ls", "my "]


def test_tokenize_unterminated_quote():
    assert tokenize("cat 'my fi") == ["cat", "my fi"]
    assert tokenize('cat "my fi') == ["cat", "my fi"]
    assert tokenize("cat foo\\") == ["cat", "foo\\"]


def test_split_words_positions():
    text = 'env FOO="a b"  ls'
    assert [text[word.start : word.end] for word in split_words(text)] == ["env", 'FOO="a b"', "ls"]


def test_quoted_assignment():
    assert normalize('env FOO="a b" ls -') == "ls -"
    assert normalize('env FOO="a b" ls') == "ls"


def test_quoted_flag_value():
    assert normalize("sudo -u 'my user' ls ") == "ls "
    assert normalize("sudo -u 'my us") == "sudo -u 'my us"


def test_quoting_kept_after_wrapper():
    assert normalize("sudo cat 'my file' ") == "cat 'my file' "
    assert normalize("sudo cat 'my fi") == "cat 'my fi"


def test_repeated_sentinel_removed_once():
    """Only one marker is removed: a second one belongs to the command."""
    assert normalize("**ls") == "*ls"
