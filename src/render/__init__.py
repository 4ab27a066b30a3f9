"""Result rendering for tile-checker."""

from .html import escape_markup, render_html
from .text import render_text
from .report import render_page, write_html, generate_report

__all__ = [
    "escape_markup",
    "render_html",
    "render_text",
    "render_page",
    "write_html",
    "generate_report",
]
