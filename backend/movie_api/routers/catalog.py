"""Catalog inspection endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..dependencies import get_catalog_store
from ..schemas import CatalogMetricsModel, ServerErrorResponse
from ..stores.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get(
    "/metrics",
    response_model=CatalogMetricsModel,
    responses={500: {"model": ServerErrorResponse}},
)
def catalog_metrics(store: CatalogStore = Depends(get_catalog_store)):
    """Return aggregate catalog statistics, building the snapshot if needed."""

    try:
        return store.metrics()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Catalog metrics unavailable")
        payload = ServerErrorResponse(error=str(exc))
        return JSONResponse(status_code=500, content=payload.model_dump())
