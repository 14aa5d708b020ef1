# ai_model_registry/api/routers/models.py

from __future__ import annotations

import time
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response

from ai_model_registry.schemas.models import (
    AIModel,
    AIModelCreate,
    AIModelUpdate,
    CreatedModel,
    ModelEntry,
    ModelType,
)
from ai_model_registry.services.errors import EmptyFieldError, ModelNotFoundError
from ai_model_registry.services.registry import RegistryService
from ai_model_registry.utils.logging import logger

_START_TIME = time.time()

router = APIRouter()

_registry = RegistryService()


def get_registry() -> RegistryService:
    """Process-wide registry; tests swap it through ``dependency_overrides``."""
    return _registry


# ---------------------------------------------------------------------------
# Health / reset
# ---------------------------------------------------------------------------

@router.get("/health")
def health(registry: RegistryService = Depends(get_registry)):
    uptime = int(time.time() - _START_TIME)
    count = registry.count_models()
    logger.info("HEALTH: uptime_s=%s models=%s", uptime, count)
    return {"status": "ok", "uptime_s": uptime, "models": count}


@router.delete("/reset", status_code=200)
def reset_system(registry: RegistryService = Depends(get_registry)):
    logger.warning("RESET: registry reset requested")
    registry.reset()
    return {"status": "reset"}


# ---------------------------------------------------------------------------
# Listing / search
# ---------------------------------------------------------------------------

@router.get("/models", response_model=List[ModelEntry])
def list_models(registry: RegistryService = Depends(get_registry)):
    items = registry.list_models()
    logger.info("GET /models: total_items=%d", len(items))
    return items


@router.get("/models/search/by-type/{model_type}", response_model=List[ModelEntry])
def search_models_by_type(
    model_type: ModelType,
    registry: RegistryService = Depends(get_registry),
):
    logger.info("GET /models/search/by-type/%s", model_type.value)
    return registry.search_by_type(model_type)


@router.get("/models/search/by-tag", response_model=List[ModelEntry])
def search_models_by_tag(
    tag: str = Query(..., description="Exact, case-sensitive tag"),
    registry: RegistryService = Depends(get_registry),
):
    logger.info("GET /models/search/by-tag: tag=%s", tag)
    return registry.search_by_tag(tag)


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------

@router.post("/models", response_model=CreatedModel, status_code=201)
def create_model(
    body: AIModelCreate,
    registry: RegistryService = Depends(get_registry),
):
    logger.info("POST /models: name=%s type=%s", body.name, body.model_type.value)
    try:
        model_id = registry.create(body)
    except EmptyFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CreatedModel(id=model_id)


@router.get("/models/{model_id}", response_model=AIModel)
def get_model(
    model_id: int = Path(..., description="Registry id of the model"),
    registry: RegistryService = Depends(get_registry),
):
    record = registry.get(model_id)
    if record is None:
        logger.warning("get_model: not found id=%s", model_id)
        raise HTTPException(status_code=404, detail="Model not found")
    return record


@router.api_route("/models/{model_id}", methods=["PATCH", "PUT"], response_model=AIModel)
def update_model(
    body: AIModelUpdate,
    model_id: int = Path(..., description="Registry id of the model"),
    registry: RegistryService = Depends(get_registry),
):
    logger.info("UPDATE /models/%s: fields=%s", model_id, sorted(body.model_fields_set))
    try:
        return registry.update(model_id, body)
    except ModelNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/models/{model_id}", status_code=204)
def delete_model(
    model_id: int = Path(..., description="Registry id of the model"),
    registry: RegistryService = Depends(get_registry),
):
    try:
        registry.delete(model_id)
    except ModelNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
