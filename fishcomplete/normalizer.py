"""Rewrite a raw input line into something `complete -C` understands."""

from __future__ import annotations

import re
import shlex
from typing import NamedTuple

from .constants import DEFAULT_SENTINEL_PATTERN, PARENT_COMMANDS

__all__ = ["Word", "normalize", "split_words", "strip_sentinel", "tokenize"]


class Word(NamedTuple):
    """A shell word: its unquoted value and where it was typed in the line."""

    value: str
    start: int
    end: int


def strip_sentinel(raw: str, sentinel_pattern: str = DEFAULT_SENTINEL_PATTERN) -> str:
    """Remove the host specific prefix marker (eg: `*ls`), if any.

    An empty pattern disables stripping.
    """
    if not sentinel_pattern:
        return raw
    return re.sub(sentinel_pattern, "", raw, count=1)


def _lex(source: str, length: int) -> tuple[list[Word], str]:
    """Return the words of `source`, and the characters needed to close its last one."""
    lexer = shlex.shlex(source, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    words = []
    try:
        while True:
            position = lexer.instream.tell()
            start = position + len(source[position:]) - len(source[position:].lstrip(lexer.whitespace))
            value = lexer.get_token()
            if value is None:
                return words, ""
            end = lexer.instream.tell()
            if lexer.state == " ":
                # the separator ending the word was consumed too
                end -= 1
            words.append(Word(value, start, min(end, length)))
    except ValueError:
        # open quote or pending backslash: repeating it closes the word
        return words, lexer.state


def split_words(text: str) -> list[Word]:
    """Split `text` following the shell quoting rules.

    The last word may still be typed: an unterminated quote or a trailing
    backslash is closed before splitting, the word positions still refer to `text`.
    """
    source = text
    while True:
        words, closing = _lex(source, len(text))
        if not closing:
            return words
        source += closing


def _ends_with_separator(text: str, words: list[Word]) -> bool:
    return bool(words) and words[-1].end < len(text)


def tokenize(text: str) -> list[str]:
    """Split like a shell, keeping a trailing empty token if `text` ends with a separator.

    "ls" and "ls " must stay distinct: the former completes the command name,
    the latter its first argument.
    """
    words = split_words(text)
    tokens = [word.value for word in words]
    if _ends_with_separator(text, words):
        tokens.append("")
    return tokens


def _skip_wrapper_arguments(parent: str, tokens: list[str]) -> int | None:
    """Count the options and VAR=value assignments given to a parent command.

    None means the parent command itself must be completed.
    """
    takes_value = PARENT_COMMANDS[parent]
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.startswith("-"):
            if token in takes_value:
                # value still being typed: let the shell complete it for the parent command
                if i + 1 >= len(tokens) - 1:
                    return None
                i += 1
        elif "=" not in token:
            break
        i += 1
    return i


def normalize(raw: str, sentinel_pattern: str = DEFAULT_SENTINEL_PATTERN) -> str:
    """Return the prompt to hand to the completion engine.

    Args:
        raw: The input line up to the cursor
        sentinel_pattern: Regular expression removed from the start of the line

    Returns:
        The line without sentinel, and without the `sudo`/`env` wrapper when
        a sub-command follows it. Trailing whitespace is preserved and the
        remaining words keep their quoting.

    Eg:
        normalize("sudo -u root apt install") == "apt install"
        normalize("env LC_ALL=C ls ") == "ls "
        normalize('env FOO="a b" ls -') == "ls -"
    """
    text = strip_sentinel(raw, sentinel_pattern)
    words = split_words(text)
    if not words or words[0].value not in PARENT_COMMANDS:
        return text

    tokens = tokenize(text)
    skipped = _skip_wrapper_arguments(tokens[0], tokens[1:])
    if skipped is None:
        return text
    remaining = [text[word.start : word.end] for word in words[1 + skipped :]]
    if _ends_with_separator(text, words):
        remaining.append("")
    if not remaining:
        return text
    return " ".join(remaining)
