"""English keyword stemming (Porter, original algorithm)."""
from __future__ import annotations

from functools import lru_cache

from nltk.stem.porter import PorterStemmer

_stemmer = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)


@lru_cache(maxsize=None)
def stem_keyword(keyword: str) -> str:
    """Stem every word of `keyword` and rejoin with single spaces.

    "finished" -> "finish", "Running water" -> "run water". Heuristic by
    nature: unrelated words can merge and related ones can stay apart.
    """
    words = keyword.lower().split()
    return " ".join(_stemmer.stem(w) for w in words)
