"""Per-edition report rendering.

For one edition: keep the kanji that have an id in it, sort by that id, and
emit a CSV plus a standalone HTML table. Each keyword is annotated with the
kanji it collides with (see `services.similarity.collisions`).
"""
from __future__ import annotations

import csv
import io
import logging
import os
from html import escape
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from ...core.config import ReportConfig
from ...core.models import KanjiInfo
from ..similarity.collisions import find_collisions, heisig_stem, jpdb_stem

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "kanji",
    "heisigId",
    "heisigKeyword",
    "heisigKeywordCollisions",
    "jpdbKeyword",
    "jpdbKeywordCollisions",
]

DEFAULT_JPDB_URL = "https://jpdb.io/kanji/"


def edition_view(kanji_infos: Sequence[KanjiInfo], edition: str) -> List[KanjiInfo]:
    """Kanji present in `edition`, ascending by their id in that edition."""
    present = [info for info in kanji_infos if info.id_for(edition) is not None]
    return sorted(present, key=lambda info: info.id_for(edition))


def _collisions(view: Sequence[KanjiInfo], edition: str, info: KanjiInfo) -> Tuple[List[KanjiInfo], List[KanjiInfo]]:
    # two independent sets, one per keyword source
    return (
        find_collisions(view, info, edition, heisig_stem(info, edition)),
        find_collisions(view, info, edition, jpdb_stem(info)),
    )


def build_csv_rows(view: Sequence[KanjiInfo], edition: str) -> List[Dict[str, str]]:
    rows: List[Dict[str, str]] = []
    for info in view:
        heisig_hits, jpdb_hits = _collisions(view, edition, info)
        rows.append({
            "kanji": info.kanji,
            "heisigId": str(info.id_for(edition)),
            "heisigKeyword": info.keyword_for(edition),
            "heisigKeywordCollisions": " ".join(c.kanji for c in heisig_hits),
            "jpdbKeyword": info.jpdb_keyword,
            "jpdbKeywordCollisions": " ".join(c.kanji for c in jpdb_hits),
        })
    return rows


def render_csv(view: Sequence[KanjiInfo], edition: str) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_FIELDS, lineterminator="\n")
    writer.writeheader()
    writer.writerows(build_csv_rows(view, edition))
    return buf.getvalue()


# ---- HTML ----
_HTML_HEAD = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Kanji Keywords (Heisig {edition}th Edition)</title>
    <style>
      table {{
        border-collapse: collapse;
      }}
      th, td {{
        border: 1px solid black;
        padding: 0.5em;
      }}
      .is-different {{
        background-color: #eee;
      }}
      .collisions a {{
        color: #a00;
      }}
    </style>
  </head>
  <body>
    <h1>Kanji Keywords (Heisig {edition}th Edition)</h1>
    <p>
      Each kanji of the {edition}th edition with its Heisig keyword and the
      keyword jpdb.io uses for it. Rows where the two keywords differ are
      shaded.
    </p>
    <p>
      Links in parentheses after a keyword point to other kanji whose Heisig or
      jpdb keyword looks like the same word. Keywords are compared after
      Porter stemming ("finished" and "finish" both become "finish"), so the
      check is a heuristic: it can flag words that merely share a root and miss
      synonyms that are spelled differently.
    </p>
    <table>
      <thead>
        <tr>
          <th>Heisig ID</th>
          <th>Kanji</th>
          <th>Heisig Keyword</th>
          <th>JPDB Keyword</th>
        </tr>
      </thead>
      <tbody>
"""

_HTML_TAIL = """      </tbody>
    </table>
  </body>
</html>
"""


def row_anchor(kanji: str) -> str:
    return f"kanji-{kanji}"


def _collision_links(hits: Sequence[KanjiInfo]) -> str:
    if not hits:
        return ""
    links = " ".join(
        f'(<a href="#{escape(row_anchor(c.kanji))}">{escape(c.kanji)}</a>)' for c in hits
    )
    return f' <span class="collisions">{links}</span>'


def _html_row(view: Sequence[KanjiInfo], edition: str, info: KanjiInfo, lookup_url: str, jpdb_url: str) -> str:
    heisig_hits, jpdb_hits = _collisions(view, edition, info)
    css = "is-different" if info.is_different(edition) else ""
    kanji = escape(info.kanji)
    return (
        f'        <tr id="{escape(row_anchor(info.kanji))}" class="{css}">\n'
        f"          <td>{info.id_for(edition)}</td>\n"
        f"          <td>{kanji}</td>\n"
        f'          <td><a href="{escape(lookup_url)}{kanji}">{escape(info.keyword_for(edition))}</a>'
        f"{_collision_links(heisig_hits)}</td>\n"
        f'          <td><a href="{escape(jpdb_url)}{kanji}">{escape(info.jpdb_keyword)}</a>'
        f"{_collision_links(jpdb_hits)}</td>\n"
        f"        </tr>\n"
    )


def render_html(
    view: Sequence[KanjiInfo],
    edition: str,
    lookup_url: str = ReportConfig.lookup_url,
    jpdb_url: str = DEFAULT_JPDB_URL,
) -> str:
    rows = "".join(_html_row(view, edition, info, lookup_url, jpdb_url) for info in view)
    return _HTML_HEAD.format(edition=escape(edition)) + rows + _HTML_TAIL


# ---- Output ----
def _write_text(path: Path, text: str) -> None:
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp.open("w", encoding="utf8", newline="") as fh:
            fh.write(text)
        os.replace(str(tmp), str(path))
    finally:
        if tmp.exists():
            tmp.unlink()


def write_edition_reports(
    kanji_infos: Sequence[KanjiInfo],
    output_dir: str | Path,
    config: ReportConfig | None = None,
    jpdb_url: str = DEFAULT_JPDB_URL,
) -> Dict[str, Tuple[Path, Path]]:
    """Write ``<basename>.csv`` and ``<basename>.html`` for each configured edition.

    Returns edition -> (csv_path, html_path). Write errors propagate.
    """
    config = config or ReportConfig()
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Tuple[Path, Path]] = {}
    for edition in config.editions:
        view = edition_view(kanji_infos, edition)
        base = config.basename(edition)
        csv_path = out / f"{base}.csv"
        html_path = out / f"{base}.html"
        _write_text(csv_path, render_csv(view, edition))
        _write_text(html_path, render_html(view, edition, config.lookup_url, jpdb_url))
        logger.info("Wrote %d rows for edition %s to %s and %s", len(view), edition, csv_path, html_path)
        written[edition] = (csv_path, html_path)
    return written
