# regional_risk/api/routes_narrative.py
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from regional_risk.core.errors import RegionNotFound
from regional_risk.schemas.narrative_schema import NarrativeOut
from regional_risk.services.gemini_client import GenerationResult
from regional_risk.services.narrative_service import (
    generate_alert_message_result,
    generate_national_summary_result,
    generate_region_explanation_result,
)
from regional_risk.services.region_service import get_processed_region, load_processed_regions

log = logging.getLogger(__name__)

router = APIRouter()

PROCESS_FAILED = {"error": "Failed to process region data"}
NOT_FOUND = {"error": "Region not found"}


def _out(result: GenerationResult, region_name=None) -> NarrativeOut:
    # narrative failures are rendered as default text, never as an HTTP error
    return NarrativeOut(
        text=result.render(),
        error=result.error.value if result.error else None,
        region_name=region_name,
    )


def _region_or_response(region_name: str):
    try:
        return get_processed_region(region_name), None
    except RegionNotFound:
        return None, JSONResponse(status_code=404, content=NOT_FOUND)
    except Exception:
        log.exception(f"Error processing region {region_name!r}")
        return None, JSONResponse(status_code=500, content=PROCESS_FAILED)


@router.get("/regions/{region_name}/explanation", response_model=NarrativeOut)
def region_explanation(region_name: str):
    region, failed = _region_or_response(region_name)
    if failed is not None:
        return failed
    return _out(generate_region_explanation_result(region), region.region_name)


@router.get("/regions/{region_name}/alert", response_model=NarrativeOut)
def region_alert(region_name: str):
    region, failed = _region_or_response(region_name)
    if failed is not None:
        return failed
    return _out(generate_alert_message_result(region), region.region_name)


@router.get("/national", response_model=NarrativeOut)
def national_summary():
    try:
        regions = load_processed_regions()
        return _out(generate_national_summary_result(regions))
    except Exception:
        log.exception("Error building national summary")
        return JSONResponse(status_code=500, content=PROCESS_FAILED)
