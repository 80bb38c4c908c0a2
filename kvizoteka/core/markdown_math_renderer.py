"""Markdown + LaTeX rendering helpers shared by Qt and web renderers.

Architecture note:
    Question text is converted to HTML once per redraw and MathJax typesets it
    at display time. The Qt window (via QWebEngineView) and the browser page
    use the same fragments, so both renderers show identical markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import html

from markdown_it import MarkdownIt

_MATHJAX_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
)


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

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

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line (an answer label) without a wrapping paragraph."""

        return self._markdown.renderInline(markdown_text.strip())

    def wrap_with_mathjax(
        self,
        body_html: str,
        title: str = "Kvizoteka",
        font_size: int = 14,
    ) -> str:
        """Wrap a fragment inside a minimal HTML document that loads MathJax."""

        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{html.escape(title)}</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: transparent; color: #f5f7ff; }}
      .question-html {{ font-size: {font_size}pt; line-height: 1.5; }}
      .question-image {{ display: block; max-width: 100%; max-height: 260px; margin: 0 auto 1rem; border-radius: 0.75rem; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src=\"{_MATHJAX_SCRIPT}\"></script>
  </head>
  <body>
    <div class=\"question-html\">{body_html}</div>
  </body>
</html>"""


renderer = MarkdownMathRenderer()
# Shared instance; MarkdownIt is safe for concurrent read-only renders, so the
# Qt thread and the API thread both reuse it.
