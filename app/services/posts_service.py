import logging
from pathlib import Path
from typing import Callable, List, Optional

import frontmatter
from pydantic import ValidationError

from app.schemas.blog import Post
from app.services.rendering import render_post_content
from app.settings import settings
from app.utils import convert_date_to_string, date_sort_key, truncate

logger = logging.getLogger(__name__)


class PostsService:
    """Resolves posts from the remote store, falling back to local documents."""

    def __init__(
        self,
        repo,
        local_repo,
        render_content: Callable[[str], str] = render_post_content,
        excerpt_length: int = settings.EXCERPT_LENGTH,
    ):
        self.repo = repo
        self.local_repo = local_repo
        self.render_content = render_content
        self.excerpt_length = excerpt_length

    def list_posts(self) -> List[Post]:
        try:
            return _first_result(self._remote_posts, self._local_posts) or []
        except Exception as e:
            logger.error(f"Unexpected error listing posts: {e}")
            return []

    def get_post(self, slug: str) -> Optional[Post]:
        """Return the post for ``slug`` or None when nothing matches anywhere."""
        try:
            return _first_result(
                lambda: self._remote_post(slug),
                lambda: self._local_post(slug),
            )
        except Exception as e:
            logger.error(f"Unexpected error retrieving post {slug}: {e}")
            return None

    # Remote store

    def _remote_posts(self) -> List[Post]:
        try:
            rows = self.repo.list_posts()
        except Exception as e:
            logger.error(f"Remote post store query failed: {e}")
            return []
        posts = (map_remote_post(row, self.excerpt_length) for row in rows or [])
        return [post for post in posts if post]

    def _remote_post(self, slug: str) -> Optional[Post]:
        try:
            row = self.repo.get_by_slug(slug)
        except Exception as e:
            logger.error(f"Remote post store lookup for {slug} failed: {e}")
            return None
        return map_remote_post(row, self.excerpt_length) if row else None

    # Local documents

    def _local_posts(self) -> List[Post]:
        posts = []
        for path in self.local_repo.list_documents():
            parsed = self._load_document(path)
            if parsed is None:
                continue
            post = self._build_local_post(path, parsed)
            if post:
                posts.append(post)

        posts.sort(key=lambda p: date_sort_key(p.date), reverse=True)
        return posts

    def _local_post(self, slug: str) -> Optional[Post]:
        for path in self.local_repo.list_documents():
            parsed = self._load_document(path)
            if parsed is None:
                continue
            if _text(parsed.metadata.get("slug")) != slug:
                continue
            post = self._build_local_post(path, parsed)
            if post:
                return post
        return None

    def _load_document(self, path: Path) -> Optional[frontmatter.Post]:
        try:
            return frontmatter.loads(self.local_repo.read_document(path))
        except Exception as e:
            logger.warning(f"Failed to parse local document {path}: {e}")
            return None

    def _build_local_post(
        self, path: Path, parsed: frontmatter.Post
    ) -> Optional[Post]:
        try:
            return parse_local_post(parsed, self.render_content, self.excerpt_length)
        except Exception as e:
            logger.warning(f"Skipping local document {path}: {e}")
            return None


def parse_local_post(
    parsed: frontmatter.Post,
    render_content: Callable[[str], str],
    excerpt_length: int = settings.EXCERPT_LENGTH,
) -> Post:
    """Build a post from a parsed document; raises ValidationError if incomplete."""
    metadata = parsed.metadata or {}
    body = parsed.content or ""
    excerpt = _text(metadata.get("excerpt")) or body.strip()

    return Post(
        title=_text(metadata.get("title")),
        date=_text(metadata.get("date")),
        slug=_text(metadata.get("slug")),
        excerpt=truncate(excerpt, excerpt_length),
        featuredImage=_text(metadata.get("featuredImage")) or None,
        content=render_content(body),
    )


def map_remote_post(
    row: dict, excerpt_length: int = settings.EXCERPT_LENGTH
) -> Optional[Post]:
    """Map a `blog_posts` row (wire names) onto a post; None if incomplete."""
    try:
        return Post(
            title=_text(row.get("title")),
            date=_text(row.get("date")),
            slug=_text(row.get("slug")),
            excerpt=truncate(_text(row.get("excerpt")), excerpt_length),
            featuredImage=row.get("featured_image") or None,
            content=row.get("content") or "",
        )
    except ValidationError as e:
        logger.warning(f"Skipping remote post {row.get('slug')!r}: {e}")
        return None


def _first_result(*lookups):
    for lookup in lookups:
        result = lookup()
        if result:
            return result
    return None


def _text(value) -> str:
    if value is None:
        return ""
    return str(convert_date_to_string(value)).strip()
