"""Convert uploaded HTML documents to markdown."""

import re

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter

UNWANTED_TAGS = ["script", "style", "noscript", "iframe", "head"]


class PostMarkdownConverter(MarkdownConverter):
    """ATX headings, `-` bullets, `---` rules and fenced code blocks."""

    def __init__(self, **options):
        options.setdefault("heading_style", ATX)
        options.setdefault("bullets", "-")
        super().__init__(**options)

    def convert_img(self, el, text, *args, **kwargs):
        alt = el.attrs.get("alt") or ""
        src = el.attrs.get("src") or ""
        title = el.attrs.get("title")
        title_part = f' "{title}"' if title else ""
        return f"![{alt}]({src}{title_part})"


def html_to_markdown(html: str) -> str:
    soup = BeautifulSoup(html or "", "lxml")

    for tag in soup.find_all(UNWANTED_TAGS):
        # Nested matches go away with their decomposed parent
        if not tag.decomposed:
            tag.decompose()

    root = soup.find("body") or soup
    markdown = PostMarkdownConverter().convert_soup(root)

    # Collapse runs of blank lines left behind by block elements
    markdown = re.sub(r"\n{3,}", "\n\n", markdown)
    return markdown.strip()
