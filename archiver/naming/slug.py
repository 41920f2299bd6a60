"""Filesystem- and URL-safe slugs.

Text is folded to lower-case ASCII with ICU (``Any-Latin; Latin-ASCII;
Lower``), then every run of characters outside ``[a-z0-9]`` collapses into
one separator.
"""

import functools
import re
import unicodedata

import icu  # type: ignore[import-untyped]

_ICU_TRANSFORM = "Any-Latin; Latin-ASCII; Lower"
_INVALID_RUN_RE = re.compile(r"[^a-z0-9]+")


@functools.lru_cache(maxsize=1)
def _transliterator() -> "icu.Transliterator":
    return icu.Transliterator.createInstance(_ICU_TRANSFORM)


def slugify(text: str, separator: str = "-") -> str:
    """Return *text* as a slug joined by *separator*.

    >>> slugify("Gfwob Abrechnung für 2018")
    'gfwob-abrechnung-fur-2018'
    """
    normalized = unicodedata.normalize("NFC", text)
    folded = _transliterator().transliterate(normalized)
    return _INVALID_RUN_RE.sub(separator, folded).strip(separator)
