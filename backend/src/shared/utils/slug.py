"""
Slug Utilities

Turns arbitrary titles into URL-safe identifiers.

Algorithm:
==========
    "  Şişli'de Güzel Bir Gün!  "
        │ lower + trim
        ▼
    "şişli'de güzel bir gün!"
        │ transliterate (ş→s, ı→i, ğ→g, ü→u, ö→o, ç→c)
        ▼
    "sisli'de guzel bir gun!"
        │ drop anything outside [a-z0-9 whitespace -]
        ▼
    "sislide guzel bir gun"
        │ whitespace runs → "-", hyphen runs → "-", trim "-"
        ▼
    "sislide-guzel-bir-gun"

The result can be empty (e.g. a title made only of emoji); callers must
supply a fallback.

Usage:
======
    from src.shared.utils.slug import to_slug, with_suffix

    to_slug("Ben Ahmet - Kaya")        # "ben-ahmet-kaya"
    with_suffix("ben-ahmet", 2)        # "ben-ahmet-2"
"""

import re


# Fixed substitution table; not a general transliteration library
TRANSLITERATIONS = str.maketrans(
    {
        "ş": "s",
        "Ş": "s",
        "ı": "i",
        "İ": "i",
        "ğ": "g",
        "Ğ": "g",
        "ü": "u",
        "Ü": "u",
        "ö": "o",
        "Ö": "o",
        "ç": "c",
        "Ç": "c",
    }
)

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def to_slug(text: str) -> str:
    """
    Convert text to a lowercase, hyphenated, ASCII-only slug.

    Deterministic and idempotent: to_slug(to_slug(x)) == to_slug(x).

    Args:
        text: Any input text (typically a post title)

    Returns:
        Slug made of [a-z0-9] and single inner hyphens; may be empty
    """
    # "İ".lower() yields "i" + U+0307; the combining dot is removed below
    slug = text.lower().strip().translate(TRANSLITERATIONS)
    slug = _INVALID_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def with_suffix(base: str, attempt: int) -> str:
    """
    Candidate slug for the given attempt number.

    Attempt 1 is the base slug itself; later attempts append "-<n>".

    Args:
        base: Slug produced by to_slug()
        attempt: 1-based attempt counter

    Returns:
        Slug candidate
    """
    if attempt <= 1:
        return base
    return f"{base}-{attempt}"
