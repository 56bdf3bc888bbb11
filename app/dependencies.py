from fastapi import Depends

from app.db.postgres.base import get_db
from app.repos.local_docs_repo import LocalDocsRepo
from app.repos.posts_repo import SqlPostsRepo
from app.services.posts_service import PostsService
from app.services.upload_service import DraftStore, UploadService
from app.settings import Settings, get_settings

draft_store = DraftStore()


def get_posts_repo(db=Depends(get_db)):
    return SqlPostsRepo(db)


def get_local_docs_repo(current_settings: Settings = Depends(get_settings)):
    return LocalDocsRepo(current_settings.content_path, current_settings.CONTENT_GLOB)


def get_posts_service(
    repo=Depends(get_posts_repo),
    local_repo=Depends(get_local_docs_repo),
):
    return PostsService(repo=repo, local_repo=local_repo)


def get_upload_service(repo=Depends(get_posts_repo)):
    return UploadService(repo=repo)


def get_draft_store() -> DraftStore:
    return draft_store
