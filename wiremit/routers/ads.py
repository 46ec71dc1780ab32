from fastapi import APIRouter, Depends, Query

from wiremit.core.config import Settings
from wiremit.models.ads import AdListOut, AdOut, CurrentAdOut
from wiremit.routers.deps import get_app_settings
from wiremit.services.ads import ADS, ad_index_at

router = APIRouter(prefix="/ads", tags=["ads"])


@router.get("", response_model=AdListOut, summary="Promotional ads and rotation interval")
async def list_ads(settings: Settings = Depends(get_app_settings)):
    return AdListOut(
        rotation_seconds=settings.ad_rotation_seconds,
        ads=[AdOut(**ad.as_dict()) for ad in ADS],
    )


@router.get("/current", response_model=CurrentAdOut, summary="Ad on screen at a point in time")
async def current_ad(
    elapsed: float = Query(0, ge=0, description="Seconds since the carousel started"),
    settings: Settings = Depends(get_app_settings),
):
    index = ad_index_at(elapsed, settings.ad_rotation_seconds)
    return CurrentAdOut(index=index, ad=AdOut(**ADS[index].as_dict()))
