import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field
from starlette.concurrency import run_in_threadpool
from starlette.responses import StreamingResponse

from bookquotes.api.sse import SSE_HEADERS, stream_session
from bookquotes.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class ScrapeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    author: Optional[str] = None
    cover_image_url: Optional[str] = Field(default=None, alias="coverImageUrl")


def create_scrape_router(scrape_runner, scrape_registry, poll_interval: float = 1.0):
    router = APIRouter(prefix="/api", tags=["Scrape"])

    @router.post(
        "/books/{work_id}/scrape",
        responses={
            200: {
                "content": {"text/event-stream": {"schema": {"type": "string"}}},
                "description": "progress, complete and error events",
            }
        },
    )
    async def scrape(work_id: str, req: ScrapeRequest, request: Request):
        try:
            session = await run_in_threadpool(
                scrape_runner.start, work_id, req.title, req.author, req.cover_image_url
            )
        except InvalidInputError as e:
            raise HTTPException(status_code=400, detail=str(e))

        return StreamingResponse(
            stream_session(session, scrape_runner, request.is_disconnected, poll_interval=poll_interval),
            media_type="text/event-stream",
            headers=SSE_HEADERS,
        )

    @router.get("/scrapes/active")
    def list_active_scrapes():
        return {"active": scrape_registry.list_active()}

    @router.get("/scrapes/{crawl_id}")
    def get_scrape(crawl_id: str):
        rec = scrape_registry.get(crawl_id)
        if not rec:
            raise HTTPException(status_code=404, detail="scrape not found")
        return rec

    @router.post("/scrapes/{crawl_id}/cancel")
    def cancel_scrape(crawl_id: str):
        if not scrape_registry.cancel(crawl_id):
            raise HTTPException(status_code=404, detail="scrape not found or cannot cancel")
        return {"status": "cancelling", "crawl_id": crawl_id}

    return router
