# conventions/casing.py
"""
String-case helpers.

- words() splits an identifier into lowercase word tokens, whatever its current style.
- kebab_case() / camel_case() render those tokens in the two conventions we enforce.
- All functions are total: an empty string maps to an empty string.
"""

import re
from typing import List


def words(text: str) -> List[str]:
    """
    Return the lowercase word tokens of `text`.

    - Any character that is not a letter or digit (dash, underscore, space, dot) separates words.
    - Every uppercase letter starts a new word, so "getAB" is "get", "a", "b".
    - Digits stay attached to the word before them ("node14"); a lowercase letter
      after a digit starts a new word.

    Letters are classified with str.isupper() and str.isalnum(), so non-ASCII names
    ("café-app") split the same way as ASCII ones.
    """
    tokens: List[str] = []
    current = ""
    for ch in text or "":
        if not ch.isalnum():
            if current:
                tokens.append(current)
            current = ""
        elif ch.isupper():
            if current:
                tokens.append(current)
            current = ch.lower()
        elif ch.isdigit():
            current += ch
        else:
            if current and current[-1].isdigit():
                tokens.append(current)
                current = ""
            current += ch
    if current:
        tokens.append(current)
    return tokens


def kebab_case(text: str) -> str:
    return "-".join(words(text))


def camel_case(text: str) -> str:
    tokens = words(text)
    if not tokens:
        return ""
    return tokens[0] + "".join(t[:1].upper() + t[1:] for t in tokens[1:])


def split_camel(text: str) -> List[str]:
    """Split at uppercase letters: "thisIsIt" -> ["this", "is", "it"]."""
    return [part.lower() for part in re.split(r"(?=[A-Z])", text or "") if part]


def split_kebab(text: str) -> List[str]:
    """Split at dashes: "this-is-it" -> ["this", "is", "it"]."""
    return [part.lower() for part in (text or "").split("-") if part]


def same_identifier(a: str, b: str) -> bool:
    """True if `a` and `b` name the same thing in either kebab or camel case."""
    return kebab_case(a) == kebab_case(b) or camel_case(a) == camel_case(b)
