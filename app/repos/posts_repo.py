import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.blog_post import BlogPost

logger = logging.getLogger(__name__)

WIRE_FIELDS = (
    "id",
    "title",
    "date",
    "slug",
    "excerpt",
    "featured_image",
    "content",
    "created_at",
)


class SqlPostsRepo:
    """Remote post store: the `blog_posts` table of the hosted Postgres."""

    def __init__(self, db: Session):
        self.db = db

    def list_posts(self) -> List[dict]:
        rows = self.db.query(BlogPost).order_by(BlogPost.created_at.desc()).all()
        return [self._to_wire(row) for row in rows]

    def get_by_slug(self, slug: str) -> Optional[dict]:
        row = self.db.query(BlogPost).filter(BlogPost.slug == slug).one_or_none()
        return self._to_wire(row) if row else None

    def insert_post(self, record: dict) -> dict:
        row = BlogPost(**{k: v for k, v in record.items() if k in WIRE_FIELDS})
        try:
            self.db.add(row)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(row)
        logger.info(f"Inserted blog post {row.slug}")
        return self._to_wire(row)

    @staticmethod
    def _to_wire(row: BlogPost) -> dict:
        return {field: getattr(row, field) for field in WIRE_FIELDS}
