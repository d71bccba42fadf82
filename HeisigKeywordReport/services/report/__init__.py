"""CSV and HTML report output."""
from .render import edition_view, render_csv, render_html, write_edition_reports

__all__ = ["edition_view", "render_csv", "render_html", "write_edition_reports"]
