"""Markdown to sanitized HTML.

Both steps are plain ``text -> text`` functions so another renderer or
sanitizer can be dropped in without touching the callers.
"""

import markdown
import nh3

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]

# Keep the language class that fenced code blocks carry.
_ALLOWED_ATTRIBUTES = {tag: set(attrs) for tag, attrs in nh3.ALLOWED_ATTRIBUTES.items()}
_ALLOWED_ATTRIBUTES.setdefault("code", set()).add("class")


def render_markdown(text: str) -> str:
    return markdown.markdown(text or "", extensions=MARKDOWN_EXTENSIONS)


def sanitize_html(html: str) -> str:
    """Strip scripts, event handlers and unsafe URLs, keep formatting tags."""
    return nh3.clean(html or "", attributes=_ALLOWED_ATTRIBUTES)


def render_post_content(text: str) -> str:
    return sanitize_html(render_markdown(text))
