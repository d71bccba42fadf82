import sys
from pathlib import Path

# Add the project root (one level up from 'test') to sys.path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import csv
import io

from HeisigKeywordReport.core.config import ReportConfig
from HeisigKeywordReport.core.models import KanjiInfo
from HeisigKeywordReport.services.report.render import (
    CSV_FIELDS, edition_view, render_csv, render_html, write_edition_reports,
)


def _info(kanji, id5, id6, keyword5, keyword6, jpdb):
    return KanjiInfo(kanji=kanji, heisig_id={"5": id5, "6": id6},
                     heisig_keyword={"5": keyword5, "6": keyword6}, jpdb_keyword=jpdb)


PERSON = _info("人", 1, 1, "person", "person", "human")


def test_person_row():
    text = render_csv([PERSON], "5")
    lines = text.splitlines()
    assert lines[0] == ",".join(CSV_FIELDS)
    assert lines[1] == "人,1,person,,human,"


def test_person_row_flagged_in_html():
    html = render_html([PERSON], "5")
    assert 'id="kanji-人" class="is-different"' in html
    assert '<a href="https://kanji.koohii.com/study/kanji/人">person</a>' in html
    assert '<a href="https://jpdb.io/kanji/人">human</a>' in html
    assert "Heisig 5th Edition" in html


def test_same_keyword_not_flagged():
    html = render_html([_info("一", 1, 1, "one", "one", "one")], "5")
    assert 'class=""' in html
    assert "is-different\"" not in html.split("<tbody>")[1]


def test_collisions_listed_in_csv_and_html():
    infos = [_info("終", 1, 1, "finish", "finish", "end"), _info("了", 2, 2, "finished", "finished", "complete")]
    rows = list(csv.DictReader(io.StringIO(render_csv(infos, "5"))))
    assert rows[0]["heisigKeywordCollisions"] == "了"
    assert rows[1]["heisigKeywordCollisions"] == "終"
    assert rows[0]["jpdbKeywordCollisions"] == ""
    html = render_html(infos, "5")
    assert '(<a href="#kanji-了">了</a>)' in html
    assert '(<a href="#kanji-終">終</a>)' in html


def test_view_filters_and_sorts_by_edition_id():
    infos = [
        _info("三", 3, 1, "three", "three", "three"),
        _info("一", 1, 3, "one", "one", "one"),
        _info("込", None, 2, "", "crowded", "crowded"),
        _info("㐂", None, None, "", "", "joy"),
    ]
    assert [i.kanji for i in edition_view(infos, "5")] == ["一", "三"]
    assert [i.kanji for i in edition_view(infos, "6")] == ["三", "込", "一"]
    for edition in ("5", "6"):
        rows = list(csv.DictReader(io.StringIO(render_csv(edition_view(infos, edition), edition))))
        ids = [int(r["heisigId"]) for r in rows]
        assert ids == sorted(set(ids))
        assert "㐂" not in {r["kanji"] for r in rows}


def test_keywords_are_escaped():
    html = render_html([_info("一", 1, 1, "<one>", "<one>", "a & b")], "5")
    assert "&lt;one&gt;" in html
    assert "a &amp; b" in html


def test_write_edition_reports(tmp_path):
    infos = [PERSON, _info("込", None, 2066, "", "crowded", "crowded")]
    written = write_edition_reports(infos, tmp_path / "docs", ReportConfig())
    assert list(written) == ["5", "6"]
    csv5, html5 = written["5"]
    assert csv5 == tmp_path / "docs" / "kanji-keywords-5th-edition.csv"
    assert html5 == tmp_path / "docs" / "kanji-keywords-5th-edition.html"
    assert "込" not in csv5.read_text(encoding="utf8")
    assert "込,2066,crowded,,crowded," in written["6"][0].read_text(encoding="utf8")
    assert sorted(p.name for p in (tmp_path / "docs").iterdir()) == [
        "kanji-keywords-5th-edition.csv", "kanji-keywords-5th-edition.html",
        "kanji-keywords-6th-edition.csv", "kanji-keywords-6th-edition.html",
    ]
