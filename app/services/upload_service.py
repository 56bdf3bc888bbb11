import datetime
import logging
import re
import threading
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from app.errors import (
    DraftValidationError,
    InvalidFileTypeError,
    PublishError,
    SubmissionInProgressError,
)
from app.services.html_converter import html_to_markdown
from app.services.rendering import render_post_content
from app.settings import settings
from app.utils import slugify, truncate

logger = logging.getLogger(__name__)

HTML_EXTENSIONS = (".html", ".htm")
HTML_CONTENT_TYPE = "text/html"

_TITLE_PATTERN = re.compile(r"^#(?!#)[ \t]*(\S.*)$", re.MULTILINE)


@dataclass
class Draft:
    """Editable working copy of one uploaded document."""

    filename: str
    date: str
    markdown: str = ""
    title: str = ""
    slug: str = ""
    excerpt: str = ""
    featured_image: str = ""
    error: Optional[str] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    _guard: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    @property
    def submitting(self) -> bool:
        return self._guard.locked()

    def begin_submission(self) -> bool:
        """Claim the draft for one submission; False if one is in flight."""
        return self._guard.acquire(blocking=False)

    def end_submission(self) -> None:
        self._guard.release()

    def update(
        self,
        title: Optional[str] = None,
        date: Optional[str] = None,
        excerpt: Optional[str] = None,
        featured_image: Optional[str] = None,
        markdown: Optional[str] = None,
    ) -> "Draft":
        if title is not None:
            self.title = title
            self.slug = slugify(title)
        if date is not None:
            self.date = date
        if excerpt is not None:
            self.excerpt = excerpt
        if featured_image is not None:
            self.featured_image = featured_image
        if markdown is not None:
            self.markdown = markdown
        return self

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "filename": self.filename,
            "title": self.title,
            "slug": self.slug,
            "date": self.date,
            "excerpt": self.excerpt,
            "featuredImage": self.featured_image,
            "markdown": self.markdown,
            "submitting": self.submitting,
            "error": self.error,
        }


def is_html_file(filename: Optional[str], content_type: Optional[str]) -> bool:
    if filename and filename.lower().endswith(HTML_EXTENSIONS):
        return True
    return (content_type or "").split(";")[0].strip().lower() == HTML_CONTENT_TYPE


def extract_metadata(markdown: str, excerpt_length: int = settings.EXCERPT_LENGTH) -> dict:
    """Best-effort title/slug/excerpt from converted markdown.

    Fields that cannot be found come back empty; the user fixes them while
    editing the draft.
    """
    title_match = _TITLE_PATTERN.search(markdown or "")
    title = title_match.group(1).strip() if title_match else ""

    excerpt = ""
    for line in (markdown or "").splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            excerpt = truncate(stripped, excerpt_length)
            break

    return {
        "title": title,
        "slug": slugify(title) if title else "",
        "excerpt": excerpt,
    }


def accept_html_document(
    filename: Optional[str],
    content_type: Optional[str],
    data,
    today: Optional[datetime.date] = None,
) -> Draft:
    if not is_html_file(filename, content_type):
        raise InvalidFileTypeError("Please select a valid HTML file")

    html = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    markdown = html_to_markdown(html)
    metadata = extract_metadata(markdown)
    logger.debug(f"Converted {filename} to {len(markdown)} chars of markdown")

    return Draft(
        filename=filename or "",
        date=(today or datetime.date.today()).isoformat(),
        markdown=markdown,
        **metadata,
    )


class DraftStore:
    """In-process registry of open drafts, keyed by draft id."""

    def __init__(self):
        self._drafts: Dict[str, Draft] = {}
        self._lock = threading.Lock()

    def add(self, draft: Draft) -> Draft:
        with self._lock:
            self._drafts[draft.id] = draft
        return draft

    def get(self, draft_id: str) -> Optional[Draft]:
        return self._drafts.get(draft_id)

    def discard(self, draft_id: str) -> None:
        with self._lock:
            self._drafts.pop(draft_id, None)

    def __len__(self) -> int:
        return len(self._drafts)


class UploadService:
    def __init__(
        self,
        repo,
        render_content: Callable[[str], str] = render_post_content,
        excerpt_length: int = settings.EXCERPT_LENGTH,
    ):
        self.repo = repo
        self.render_content = render_content
        self.excerpt_length = excerpt_length

    def submit(self, draft: Draft) -> str:
        """Insert the draft into the remote store and return its slug."""
        if not draft.title.strip() or not draft.markdown.strip():
            raise DraftValidationError("Title and content are required")
        if not slugify(draft.title):
            raise DraftValidationError("Title must contain letters or digits")

        if not draft.begin_submission():
            raise SubmissionInProgressError("This draft is already being deployed")

        try:
            record = self.build_record(draft)
            try:
                self.repo.insert_post(record)
            except Exception as e:
                logger.error(f"Failed to deploy draft {draft.id}: {e}")
                draft.error = _store_message(e)
                raise PublishError(draft.error) from e

            draft.error = None
            logger.info(f"Deployed draft {draft.id} as {record['slug']}")
            return record["slug"]
        finally:
            draft.end_submission()

    def build_record(self, draft: Draft) -> dict:
        """Wire-named row for the `blog_posts` table; created_at is server-side."""
        # The title may have been edited after upload, so the slug follows it.
        slug = slugify(draft.title)
        return {
            "slug": slug,
            "title": draft.title,
            "date": draft.date,
            "excerpt": truncate(
                draft.excerpt or draft.markdown, self.excerpt_length
            ),
            "featured_image": draft.featured_image or None,
            "content": self.render_content(draft.markdown),
        }


def _store_message(exc: Exception) -> str:
    # SQLAlchemy wraps driver errors; the driver's text is the store's message.
    message = str(getattr(exc, "orig", None) or exc).strip()
    return message or "Failed to deploy blog post"
