"""Clinic settings endpoints."""

from fastapi import APIRouter, Depends

from ...store import ClinicSettings, EntityStore, get_entity_store

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=ClinicSettings)
async def get_settings(store: EntityStore = Depends(get_entity_store)) -> ClinicSettings:
    """Get the clinic-wide letterhead defaults."""
    return store.settings


@router.put("", response_model=ClinicSettings)
async def replace_settings(
    settings: ClinicSettings,
    store: EntityStore = Depends(get_entity_store),
) -> ClinicSettings:
    """Replace the clinic settings. Fields left out are reset to empty."""
    return store.set_settings(settings)
