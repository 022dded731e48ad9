"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.diff import DiffOptions
from services.config_manager import ConfigManager

router = APIRouter()


class LimitsConfig(BaseModel):
    """Engine limits"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    max_lines: int | None = None
    max_line_tokens: int | None = None
    max_alignment_work: int | None = None


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    defaults: DiffOptions | None = None
    limits: LimitsConfig | None = None
    log_level: str | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    defaults: DiffOptions
    limits: LimitsConfig
    server: dict
    log_level: str


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        defaults=DiffOptions.model_validate(config.get("defaults", {})),
        limits=LimitsConfig.model_validate(config.get("limits", {})),
        server=config.get("server", {}),
        log_level=config.get("logLevel", "INFO"),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.defaults is not None:
        current_config["defaults"] = request.defaults.model_dump(by_alias=True)
    if request.limits is not None:
        provided = request.limits.model_dump(by_alias=True, exclude_none=True)
        if any(value < 1 for value in provided.values()):
            raise HTTPException(status_code=422, detail="Limits must be positive")
        current_config["limits"] = {**current_config.get("limits", {}), **provided}
    if request.log_level:
        current_config["logLevel"] = request.log_level.upper()

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}
