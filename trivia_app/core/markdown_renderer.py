"""Markdown rendering helpers shared by the Qt host and the audience page.

Both views render the same slide through this module so the host sees exactly
what the room sees. Raw HTML in authored text is disabled; question text is
user content and is escaped like any other markdown text.
"""

from __future__ import annotations

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
        """Render a markdown string into a block-level HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line of markdown without wrapping paragraphs."""

        return self._markdown.renderInline(markdown_text.strip())

    def wrap_document(self, body_html: str, title: str, font_size: int) -> str:
        """Wrap a fragment inside a minimal standalone HTML document."""

        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{title}</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 2rem; background: #0b1120; color: #f5f7ff; font-size: {font_size}pt; }}
      .slide {{ display: flex; flex-direction: column; align-items: center; justify-content: center; min-height: 80vh; text-align: center; gap: 1rem; }}
      .option {{ margin: 0.25rem 0; }}
      .answer {{ color: #facc15; }}
      .label {{ color: #94a3b8; }}
    </style>
  </head>
  <body>
    {body_html}
  </body>
</html>"""


renderer = MarkdownRenderer()
# MarkdownIt is safe for read-only renders, so the Qt thread and the API
# thread share this instance.
