"""Markdown rendering helpers for quiz prompts and the round review.

Architecture note:
    Prompts, feedback and the review table are authored as markdown and
    converted to a self-contained HTML document for the Qt web view. Keeping
    the markup in markdown lets the review reuse tables without hand-built
    HTML, and the styling lives in a single place below.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_document(self, body_html: str, title: str = "IntervalQt", font_size: int = 14) -> str:
        """Wrap a fragment inside a minimal styled HTML document."""

        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{html.escape(title)}</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: transparent; color: #1e1e1e; }}
      .quiz-html {{ font-size: {font_size}pt; line-height: 1.5; }}
      table {{ border-collapse: collapse; margin: 0.5rem 0; }}
      th, td {{ border: 1px solid #d1d1d1; padding: 0.25rem 0.6rem; text-align: left; }}
      th {{ background: #f5f5f5; }}
    </style>
  </head>
  <body>
    <div class=\"quiz-html\">{body_html}</div>
  </body>
</html>"""

    def render_full_document(self, markdown_text: str, title: str = "IntervalQt", font_size: int = 14) -> str:
        """Convenience wrapper to render markdown into a styled document."""

        fragment = self.render_fragment(markdown_text)
        return self.wrap_document(fragment, title=title, font_size=font_size)


renderer = MarkdownRenderer()
# Shared instance; MarkdownIt is safe to reuse for read-only renders.
