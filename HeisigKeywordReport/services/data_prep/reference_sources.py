"""Heisig reference list loader.

Parses the heisig-kanjis CSV (one row per kanji, header row required) into
`ReferenceRecord` objects. Only the glyph, the two edition ids and the two
edition keywords are needed downstream; the remaining columns are carried
through as plain strings.
"""
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, List, Optional, Set

from ...core.models import EDITIONS, ReferenceRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("kanji", "id_5th_ed", "id_6th_ed", "keyword_5th_ed", "keyword_6th_ed")
AUX_COLUMNS = ("components", "on_reading", "kun_reading", "stroke_count", "jlpt")


class ReferenceDataError(ValueError):
    """The reference file is malformed; nothing downstream can be trusted."""


def _id_column(edition: str) -> str:
    return f"id_{edition}th_ed"


def _keyword_column(edition: str) -> str:
    return f"keyword_{edition}th_ed"


def parse_optional_id(value: Optional[str], line: int, column: str) -> Optional[int]:
    """Return None for a blank cell, the integer otherwise.

    Anything that is neither blank nor an integer raises ReferenceDataError.
    """
    text = (value or "").strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        raise ReferenceDataError(f"line {line}: column {column!r} is not an integer: {value!r}") from None


def load_reference_csv(path: str | Path) -> List[ReferenceRecord]:
    """Load the reference list and return one record per kanji, in file order.

    A leading UTF-8 byte order mark is ignored.

    Raises:
        FileNotFoundError: the file does not exist.
        ReferenceDataError: the file is not valid UTF-8 CSV, a required column
            is missing, an id is malformed, a kanji cell is empty, or a kanji /
            per-edition id is duplicated.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    try:
        with p.open("r", encoding="utf-8-sig", newline="") as fh:
            records = _parse_rows(csv.DictReader(fh), p)
    except UnicodeDecodeError as e:
        raise ReferenceDataError(f"{p}: not valid UTF-8: {e}") from e
    except csv.Error as e:
        raise ReferenceDataError(f"{p}: malformed CSV: {e}") from e

    logger.info("Loaded %d reference rows from %s", len(records), p)
    return records


def _parse_rows(reader: csv.DictReader, p: Path) -> List[ReferenceRecord]:
    missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
    if missing:
        raise ReferenceDataError(f"{p}: missing required column(s): {', '.join(missing)}")

    records: List[ReferenceRecord] = []
    seen_kanji: Set[str] = set()
    seen_ids: Dict[str, Dict[int, str]] = {e: {} for e in EDITIONS}

    for row in reader:
        # header is line 1
        line = reader.line_num
        if not any((v or "").strip() for v in row.values() if isinstance(v, str)):
            continue
        kanji = (row.get("kanji") or "").strip()
        if not kanji:
            raise ReferenceDataError(f"line {line}: empty kanji cell")
        if kanji in seen_kanji:
            raise ReferenceDataError(f"line {line}: duplicate kanji {kanji}")
        seen_kanji.add(kanji)

        heisig_id: Dict[str, Optional[int]] = {}
        heisig_keyword: Dict[str, str] = {}
        for edition in EDITIONS:
            col = _id_column(edition)
            ident = parse_optional_id(row.get(col), line, col)
            if ident is not None:
                other = seen_ids[edition].get(ident)
                if other is not None:
                    raise ReferenceDataError(
                        f"line {line}: {col} {ident} already used by {other}"
                    )
                seen_ids[edition][ident] = kanji
            heisig_id[edition] = ident
            heisig_keyword[edition] = (row.get(_keyword_column(edition)) or "").strip()

        aux = {c: (row.get(c) or "").strip() for c in AUX_COLUMNS}
        records.append(ReferenceRecord(kanji=kanji, heisig_id=heisig_id,
                                       heisig_keyword=heisig_keyword, **aux))
    return records
