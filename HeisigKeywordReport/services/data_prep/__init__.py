"""Reference data loading."""
from .reference_sources import ReferenceDataError, load_reference_csv

__all__ = ["ReferenceDataError", "load_reference_csv"]
