"""
HelloAPI - Search Route Handler
================================

What:  GET /search echoes its `q` and `limit` query parameters.

Defaults apply only when a parameter is absent: `?q=` yields an empty
string, not the default. A repeated parameter (`?q=a&q=b`) yields its
first value.
"""

from typing import List

from fastapi import APIRouter, Query

from helloapi.schemas.demo import SearchResponse

router = APIRouter(tags=["Search"])

DEFAULT_QUERY = ""
DEFAULT_LIMIT = "10"


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Echo search parameters",
)
async def search(
    # Lists collect every occurrence; only the first one is used
    q: List[str] = Query(default=[DEFAULT_QUERY], description="Search text"),
    # Kept as str: the value is passed through, never interpreted as a page size
    limit: List[str] = Query(default=[DEFAULT_LIMIT], description="Result limit, echoed verbatim"),
) -> SearchResponse:
    return SearchResponse(query=q[0], limit=limit[0])
