import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


class LocalDocsRepo:
    """Read-only directory of markdown posts shipped with the deployment."""

    def __init__(self, content_dir: Path, pattern: str = "*.md"):
        self.content_dir = Path(content_dir)
        self.pattern = pattern

    def list_documents(self) -> List[Path]:
        if not self.content_dir.is_dir():
            logger.warning(f"Local content directory {self.content_dir} not found")
            return []
        return sorted(p for p in self.content_dir.glob(self.pattern) if p.is_file())

    def read_document(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")
