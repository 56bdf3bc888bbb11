import logging

from fastapi import FastAPI

from app.routers import posts, uploads
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Blog Content API",
    description="Blog posts with local fallback, and HTML to post conversion",
)

app.include_router(posts.router)
app.include_router(uploads.router)


@app.get("/")
async def root():
    return {"message": "Blog Content API is running"}
