"""Core data model.

Only dataclass definitions and trivial helpers; parsing, fetching and stemming
live in the services package.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Editions are processed in this order.
EDITIONS: Tuple[str, ...] = ("5", "6")


# ---- Reference list ----
@dataclass(frozen=True)
class ReferenceRecord:
    kanji: str
    heisig_id: Mapping[str, Optional[int]] = field(default_factory=dict)  # edition -> id, None when absent
    heisig_keyword: Mapping[str, str] = field(default_factory=dict)  # edition -> keyword
    # auxiliary columns, kept verbatim
    components: str = ""
    on_reading: str = ""
    kun_reading: str = ""
    stroke_count: str = ""
    jlpt: str = ""

    def __post_init__(self):
        # read-only copies, so a loaded record cannot be changed through its maps
        object.__setattr__(self, "heisig_id", MappingProxyType(dict(self.heisig_id)))
        object.__setattr__(self, "heisig_keyword", MappingProxyType(dict(self.heisig_keyword)))

    def __hash__(self):
        return hash((self.kanji, tuple(sorted(self.heisig_id.items())),
                     tuple(sorted(self.heisig_keyword.items()))))

    def id_for(self, edition: str) -> Optional[int]:
        return self.heisig_id.get(edition)

    def keyword_for(self, edition: str) -> str:
        return self.heisig_keyword.get(edition, "")


# ---- Enriched record ----
@dataclass(frozen=True)
class KanjiInfo(ReferenceRecord):
    """Reference record plus the keyword scraped from jpdb.io.

    Stems are deliberately not stored here; they are derived from the keyword
    strings on demand (see `services.similarity.collisions`).
    """
    jpdb_keyword: str = ""

    @classmethod
    def from_reference(cls, record: ReferenceRecord, jpdb_keyword: str) -> "KanjiInfo":
        return cls(
            kanji=record.kanji,
            heisig_id=dict(record.heisig_id),
            heisig_keyword=dict(record.heisig_keyword),
            components=record.components,
            on_reading=record.on_reading,
            kun_reading=record.kun_reading,
            stroke_count=record.stroke_count,
            jlpt=record.jlpt,
            jpdb_keyword=jpdb_keyword,
        )

    def __hash__(self):
        return hash((super().__hash__(), self.jpdb_keyword))

    def is_different(self, edition: str) -> bool:
        return self.keyword_for(edition) != self.jpdb_keyword
