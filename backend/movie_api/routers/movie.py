"""Movie title search endpoints."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ..dependencies import get_search_service
from ..schemas import (
    ClientErrorResponse,
    MovieMatchModel,
    MovieNotFoundResponse,
    MovieQuery,
    MovieSearchResponse,
    ServerErrorResponse,
)
from ..services import SearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movie", tags=["movie"])

MISSING_NAME_MESSAGE = "Provide movie name as `name` query param or JSON body."

_RESPONSES: dict[int | str, dict[str, Any]] = {
    200: {"model": MovieSearchResponse},
    400: {"model": ClientErrorResponse},
    404: {"model": MovieNotFoundResponse},
    500: {"model": ServerErrorResponse},
}


def _search_response(name: Any, service: SearchService) -> JSONResponse:
    """Run the search and map the outcome onto the boundary's status codes."""

    if not name:
        payload = ClientErrorResponse(message=MISSING_NAME_MESSAGE)
        return JSONResponse(status_code=400, content=payload.model_dump())

    query = str(name)
    try:
        results = service.search(query)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Movie search failed for query %r", query)
        payload = ServerErrorResponse(error=str(exc))
        return JSONResponse(status_code=500, content=payload.model_dump())

    if not results:
        not_found = MovieNotFoundResponse(query=query)
        return JSONResponse(status_code=404, content=not_found.model_dump())

    found = MovieSearchResponse(
        query=query,
        matches=[MovieMatchModel.model_validate(result.to_dict()) for result in results],
    )
    return JSONResponse(status_code=200, content=found.model_dump())


@router.get("", responses=_RESPONSES, summary="Search the catalog by title")
def search_movie_by_query(
    name: str | None = Query(default=None, description="Movie title to search for."),
    service: SearchService = Depends(get_search_service),
) -> JSONResponse:
    """Return ranked catalog matches for the ``name`` query parameter."""

    return _search_response(name, service)


@router.post(
    "",
    responses=_RESPONSES,
    summary="Search the catalog by title",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": MovieQuery.model_json_schema()}}
        }
    },
)
async def search_movie_by_body(
    request: Request,
    service: SearchService = Depends(get_search_service),
) -> JSONResponse:
    """Return ranked catalog matches for the ``name`` field of the JSON body.

    Bodies that are not a JSON object carry no ``name`` and get the 400 reply.
    """

    try:
        payload = await request.json()
    except ValueError:
        payload = None

    name = MovieQuery.model_validate(payload).name if isinstance(payload, dict) else None
    return await run_in_threadpool(_search_response, name, service)
