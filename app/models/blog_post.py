from sqlalchemy import Column, DateTime, Integer, String, Text, func

from app.db.postgres.base import Base
from app.settings import settings


class BlogPost(Base):
    __tablename__ = settings.BLOG_POSTS_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(512), unique=True, index=True, nullable=False)
    title = Column(Text, nullable=False)
    date = Column(String(32), nullable=False)
    excerpt = Column(Text)
    featured_image = Column(Text)
    content = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
