"""Report and CSV writers."""

from .export import CSV_HEADERS, render_players_csv, render_report, write_text_file

__all__ = [
    "CSV_HEADERS",
    "render_players_csv",
    "render_report",
    "write_text_file",
]
