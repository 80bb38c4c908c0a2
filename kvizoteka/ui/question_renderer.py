"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

import html
from pathlib import Path

from kvizoteka.constants.ui_constants import PLACEHOLDER_IMAGE
from kvizoteka.core.markdown_math_renderer import renderer


def resolve_image_source(image_ref: str | None, base_dir: Path | None = None) -> str:
    """Return a URL usable in an <img> tag for ``image_ref``."""
    if not image_ref:
        return PLACEHOLDER_IMAGE
    if "://" in image_ref or image_ref.startswith("data:"):
        return image_ref
    path = Path(image_ref)
    if not path.is_absolute() and base_dir is not None:
        path = base_dir / path
    return path.resolve().as_uri()


def render_question_document(
    question_id: int | str,
    question_text: str,
    image_ref: str | None,
    font_size: int = 14,
    base_dir: Path | None = None,
) -> str:
    """Render a question card (image + text) as a full HTML document.

    Args:
        question_id: Identifier used for the image alt text
        question_text: The question text (supports Markdown and LaTeX)
        image_ref: Optional image path or URL; a placeholder is used when missing
        font_size: Font size in points for the question text
        base_dir: Directory relative image paths are resolved against

    Returns:
        HTML string ready for display in QWebEngineView
    """
    image_src = html.escape(resolve_image_source(image_ref, base_dir), quote=True)
    alt_text = html.escape(f"Image for question {question_id}", quote=True)
    body = (
        f'<img class="question-image" src="{image_src}" alt="{alt_text}" />'
        + renderer.render_fragment(question_text)
    )
    return renderer.wrap_with_mathjax(body, font_size=font_size)
