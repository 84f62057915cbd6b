from __future__ import annotations

from enum import Enum

NBSP = "\u00a0"
CHEM_CLASS = "chem"
LEGACY_CHEM_MARKER = "ce"

HTML_GRID_STYLE = "display:grid;grid-template-columns:1fr auto 1fr;align-items:center;"
HTML_CENTER_STYLE = "text-align:center;"
HTML_RIGHT_STYLE = "text-align:right;"


class OutputFormat(str, Enum):
    LATEX = "latex"
    HTML = "html"
    DOCX = "docx"
    FALLBACK = "fallback"

    @classmethod
    def from_pandoc(cls, name: str | OutputFormat | None) -> OutputFormat:
        """Map a pandoc writer name (e.g. "html5+smart", "latex", "docx") onto an output format.

        Any writer that is not latex, html-like or docx gets the fallback rendering.
        """
        if isinstance(name, OutputFormat):
            return name
        if not name:
            return cls.FALLBACK

        base = name.strip().lower()
        for sep in ("+", "-"):
            base = base.split(sep, 1)[0]

        if base == "latex":
            return cls.LATEX
        if "html" in base:
            return cls.HTML
        if base == "docx":
            return cls.DOCX
        return cls.FALLBACK

    @property
    def number_padding(self) -> str:
        """Non-breaking spaces placed between an inline equation and its number"""
        return NBSP * 4 if self is OutputFormat.DOCX else NBSP * 2


class ExportFormats(str, Enum):
    DOCX = "docx"
    PDF = "pdf"
    HTML = "html"
    LATEX = "latex"
    MARKDOWN = "markdown"

    @property
    def numbering_format(self) -> OutputFormat:
        # pdf goes through the latex writer
        if self is ExportFormats.PDF:
            return OutputFormat.LATEX
        return OutputFormat.from_pandoc(self.value)
