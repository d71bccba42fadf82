import sys
from pathlib import Path

# Add the project root (one level up from 'test') to sys.path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from HeisigKeywordReport.core.models import KanjiInfo
from HeisigKeywordReport.services.similarity.collisions import find_collisions, heisig_stem, jpdb_stem
from HeisigKeywordReport.services.similarity.stemming import stem_keyword


def _info(kanji, id5, keyword, jpdb, id6=None, keyword6=None):
    return KanjiInfo(
        kanji=kanji,
        heisig_id={"5": id5, "6": id6 if id6 is not None else id5},
        heisig_keyword={"5": keyword, "6": keyword6 if keyword6 is not None else keyword},
        jpdb_keyword=jpdb,
    )


def test_inflections_share_a_stem():
    assert stem_keyword("finish") == stem_keyword("finished") == "finish"
    assert stem_keyword("running") == "run"
    assert stem_keyword("Person") == "person"


def test_phrases_are_stemmed_word_by_word():
    assert stem_keyword("  running   water ") == "run water"
    assert stem_keyword("") == ""


@pytest.mark.parametrize("word", ["finished", "person", "running", "caresses", "ponies", "human"])
def test_stemming_is_stable_and_idempotent(word):
    once = stem_keyword(word)
    assert stem_keyword(word) == once
    assert stem_keyword(once) == once


def test_finish_and_finished_collide_both_ways():
    a = _info("終", 1, "finish", "end")
    b = _info("了", 2, "finished", "complete")
    c = _info("人", 3, "person", "human")
    infos = [a, b, c]
    assert find_collisions(infos, a, "5", heisig_stem(a, "5")) == [b]
    assert find_collisions(infos, b, "5", heisig_stem(b, "5")) == [a]
    assert find_collisions(infos, c, "5", heisig_stem(c, "5")) == []


def test_matches_scraped_keyword_of_others():
    a = _info("人", 1, "person", "human")
    b = _info("者", 2, "someone", "person")
    assert find_collisions([a, b], a, "5", heisig_stem(a, "5")) == [b]
    assert find_collisions([a, b], b, "5", jpdb_stem(b)) == [a]


def test_results_follow_input_order_and_exclude_subject():
    subject = _info("一", 1, "one", "one")
    others = [_info("壱", 3, "ones", "x"), _info("弌", 2, "y", "one")]
    infos = [subject] + others
    # "one" and "ones" both stem to "on"
    assert find_collisions(infos, subject, "5", stem_keyword("one")) == others
    assert find_collisions(infos, subject, "5", heisig_stem(subject, "5")) == others


def test_edition_specific_keyword():
    a = _info("一", 1, "one", "", keyword6="single")
    b = _info("単", 2, "simple", "", keyword6="single")
    assert find_collisions([a, b], a, "5", heisig_stem(a, "5")) == []
    assert find_collisions([a, b], a, "6", heisig_stem(a, "6")) == [b]


def test_empty_stem_matches_nothing():
    a = _info("一", 1, "one", "")
    b = _info("二", 2, "two", "")
    assert find_collisions([a, b], a, "5", jpdb_stem(a)) == []


def test_collisions_are_symmetric():
    infos = [
        _info("終", 1, "finish", "end"),
        _info("了", 2, "finished", "completion"),
        _info("完", 3, "perfect", "complete"),
        _info("端", 4, "edge", "end"),
        _info("人", 5, "person", "human"),
    ]
    for x in infos:
        for y in find_collisions(infos, x, "5", heisig_stem(x, "5")):
            if heisig_stem(y, "5") == heisig_stem(x, "5"):
                assert x in find_collisions(infos, y, "5", heisig_stem(y, "5"))
        for y in find_collisions(infos, x, "5", jpdb_stem(x)):
            if jpdb_stem(y) == jpdb_stem(x):
                assert x in find_collisions(infos, y, "5", jpdb_stem(y))
