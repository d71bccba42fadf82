"""Keyword collisions: different kanji whose keywords stem to the same root."""
from __future__ import annotations

from typing import Iterable, List

from ...core.models import KanjiInfo
from .stemming import stem_keyword


def heisig_stem(info: KanjiInfo, edition: str) -> str:
    return stem_keyword(info.keyword_for(edition))


def jpdb_stem(info: KanjiInfo) -> str:
    return stem_keyword(info.jpdb_keyword)


def find_collisions(kanji_infos: Iterable[KanjiInfo], subject: KanjiInfo, edition: str, stem: str) -> List[KanjiInfo]:
    """Return every other kanji whose Heisig (for `edition`) or jpdb stem equals `stem`.

    Results keep the order of `kanji_infos`. An empty stem matches nothing,
    otherwise every kanji with a missing jpdb keyword would collide with
    every other one.
    """
    if not stem:
        return []
    return [
        info for info in kanji_infos
        if info.kanji != subject.kanji
        and (heisig_stem(info, edition) == stem or jpdb_stem(info) == stem)
    ]
