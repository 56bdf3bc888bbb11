import textwrap
import threading
from pathlib import Path


class FakeRemoteRepo:
    """
    Minimal remote post store stand-in.
    Rows use the wire field names of the `blog_posts` table.
    """

    def __init__(self, rows=None, error: Exception | None = None):
        self.rows = list(rows or [])
        self.error = error
        self.calls = []
        self.inserted = []

    def list_posts(self):
        self.calls.append("list_posts")
        if self.error:
            raise self.error
        return list(self.rows)

    def get_by_slug(self, slug: str):
        self.calls.append(f"get_by_slug({slug})")
        if self.error:
            raise self.error
        return next((row for row in self.rows if row.get("slug") == slug), None)

    def insert_post(self, record: dict):
        self.calls.append("insert_post")
        if self.error:
            raise self.error
        self.inserted.append(record)
        return {**record, "id": len(self.inserted)}


class BlockingRemoteRepo(FakeRemoteRepo):
    """
    Holds insert_post open until `release` is set, to observe a submission
    that is still in flight.
    """

    def __init__(self):
        super().__init__()
        self.started = threading.Event()
        self.release = threading.Event()

    def insert_post(self, record: dict):
        self.started.set()
        self.release.wait(timeout=5)
        return super().insert_post(record)


class FakeLocalDocsRepo:
    """
    Minimal local document source stand-in, keyed by file name.
    """

    def __init__(self, docs: dict[str, str], error: Exception | None = None):
        self.docs = docs
        self.error = error
        self.reads = []

    def list_documents(self):
        if self.error:
            raise self.error
        return [Path(name) for name in sorted(self.docs)]

    def read_document(self, path: Path) -> str:
        self.reads.append(path.name)
        return textwrap.dedent(self.docs[path.name]).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        return self._get_post_return


def remote_row(slug: str, **overrides) -> dict:
    row = {
        "id": 1,
        "title": slug.replace("-", " ").title(),
        "date": "2024-01-01",
        "slug": slug,
        "excerpt": f"About {slug}",
        "featured_image": None,
        "content": f"<p>{slug}</p>",
        "created_at": None,
    }
    row.update(overrides)
    return row
