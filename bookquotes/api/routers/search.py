import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from bookquotes.exceptions import InvalidInputError, UpstreamError

logger = logging.getLogger(__name__)


def create_search_router(search_service):
    router = APIRouter(prefix="/api/search", tags=["Search"])

    @router.get("")
    def search(q: Optional[str] = None):
        try:
            hits = search_service.search(q or "")
        except InvalidInputError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except UpstreamError as e:
            raise HTTPException(status_code=502, detail=str(e))
        return [h.to_dict() for h in hits]

    return router
