import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from app import dependencies as deps
from app.errors import (
    DraftValidationError,
    InvalidFileTypeError,
    PublishError,
    SubmissionInProgressError,
)
from app.schemas.blog import DraftOut, DraftUpdate, SubmitResponse
from app.services.upload_service import (
    Draft,
    DraftStore,
    UploadService,
    accept_html_document,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads")


@router.post("", response_model=DraftOut, status_code=201)
async def upload_html(
    file: UploadFile = File(...),
    store: DraftStore = Depends(deps.get_draft_store),
):
    """Convert an uploaded HTML document into an editable markdown draft."""
    data = await file.read()
    try:
        draft = accept_html_document(file.filename, file.content_type, data)
    except InvalidFileTypeError as e:
        raise HTTPException(status_code=415, detail=e.message)

    store.add(draft)
    logger.info(f"Created draft {draft.id} from {file.filename}")
    return draft.as_dict()


@router.get("/{draft_id}", response_model=DraftOut)
def get_draft(draft_id: str, store: DraftStore = Depends(deps.get_draft_store)):
    return _get_draft_or_404(store, draft_id).as_dict()


@router.patch("/{draft_id}", response_model=DraftOut)
def update_draft(
    draft_id: str,
    changes: DraftUpdate,
    store: DraftStore = Depends(deps.get_draft_store),
):
    """Edit draft fields; a new title re-derives the slug."""
    draft = _get_draft_or_404(store, draft_id)
    if draft.submitting:
        raise HTTPException(status_code=409, detail="This draft is being deployed")

    draft.update(
        title=changes.title,
        date=changes.date,
        excerpt=changes.excerpt,
        featured_image=changes.featuredImage,
        markdown=changes.markdown,
    )
    return draft.as_dict()


@router.post("/{draft_id}/submit", response_model=SubmitResponse, status_code=201)
def submit_draft(
    draft_id: str,
    store: DraftStore = Depends(deps.get_draft_store),
    service: UploadService = Depends(deps.get_upload_service),
):
    draft = _get_draft_or_404(store, draft_id)
    try:
        slug = service.submit(draft)
    except DraftValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except SubmissionInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except PublishError as e:
        raise HTTPException(status_code=502, detail=e.message)
    except Exception as e:
        logger.error(f"Unexpected error deploying draft {draft_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to deploy blog post")

    store.discard(draft_id)
    return {"slug": slug}


def _get_draft_or_404(store: DraftStore, draft_id: str) -> Draft:
    draft = store.get(draft_id)
    if not draft:
        raise HTTPException(status_code=404, detail="Draft not found")
    return draft
