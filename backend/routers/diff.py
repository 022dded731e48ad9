"""Diff API endpoints"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from models.diff import CompareRequest, DiffOptions, DiffResult
from services.config_manager import ConfigManager
from services.diff_engine import DiffEngine
from services.exceptions import ResourceExhaustedError

logger = logging.getLogger(__name__)

router = APIRouter()


def resolve_options(request: CompareRequest, config: dict) -> DiffOptions:
    """Use the request options, or the configured defaults when omitted"""
    if request.options is not None:
        return request.options
    return DiffOptions.model_validate(config.get("defaults", {}))


# Plain def: FastAPI runs CPU-bound comparisons in its threadpool
@router.post("/compare", response_model=DiffResult)
def compare_texts(request: CompareRequest) -> DiffResult:
    """Compare two texts into unified and split views"""
    config = ConfigManager.get_instance().get_config()
    engine = DiffEngine.from_config(config)
    options = resolve_options(request, config)

    try:
        return engine.compare(request.original, request.modified, options)
    except ResourceExhaustedError as e:
        logger.warning("Comparison failed: %s", e)
        raise HTTPException(status_code=413, detail=f"Comparison failed: {e}")
