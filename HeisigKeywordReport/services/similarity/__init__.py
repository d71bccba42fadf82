"""Keyword normalisation and collision lookup."""
from .collisions import find_collisions, heisig_stem, jpdb_stem
from .stemming import stem_keyword

__all__ = ["find_collisions", "heisig_stem", "jpdb_stem", "stem_keyword"]
