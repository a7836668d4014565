"""String algorithms: infix conversion, KMP search, palindromes, brackets and a suffix trie."""

from __future__ import annotations

from collections.abc import Iterable

_OPERATORS = frozenset("^*/+-()")
_CLOSING = {"(": ")", "{": "}", "[": "]"}


def precedence(op: str) -> int:
    """Binding strength of an operator; non-operators get 0."""
    if op == "^":
        return 3
    if op in "*/" and op:
        return 2
    if op in "+-" and op:
        return 1
    return 0


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    stack: list[str] = []
    output: list[str] = []
    for ch in expression:
        if ch not in _OPERATORS:
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(ch):
                if ch == "^" and stack[-1] != "^":
                    break
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def prefix_function(pattern: str) -> list[int]:
    """Longest proper prefix of each prefix of ``pattern`` that is also its suffix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Start indices of every (possibly overlapping) occurrence of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    m, n = len(pattern), len(text)
    found = []
    i = j = 0
    while n - i >= m - j:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            found.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return found


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same backwards."""
    return text == text[::-1]


def is_valid_brackets(text: str) -> bool:
    """True when ``text`` is a properly nested sequence of (), {} and [] only."""
    stack: list[str] = []
    for ch in text:
        if ch in _CLOSING:
            stack.append(ch)
        elif not stack or _CLOSING[stack.pop()] != ch:
            return False
    return not stack


def brute_force_search(text: str, pattern: str) -> int | None:
    """First index where ``pattern`` starts, trying every window that ends before the last character."""
    m = len(pattern)
    return next((i for i in range(len(text) - m) if text[i : i + m] == pattern), None)


class SuffixTrie:
    """A trie of inserted words; any prefix of an inserted word is contained."""

    def __init__(self, text: str | None = None, words: Iterable[str] = ()):
        self._root: dict[str, dict] = {}
        if text is not None:
            for start in range(len(text)):
                self.insert(text[start:])
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add the path for ``word``."""
        node = self._root
        for ch in word:
            node = node.setdefault(ch, {})

    def contains(self, word: str) -> bool:
        """True when ``word`` is a prefix of some inserted word."""
        node = self._root
        for ch in word:
            if ch not in node:
                return False
            node = node[ch]
        return True

    def __contains__(self, word: str) -> bool:
        return self.contains(word)


def substring_search(text: str, pattern: str) -> bool:
    """True when ``pattern`` occurs in ``text``, by walking a trie of all suffixes of ``text``."""
    return SuffixTrie(text).contains(pattern)