# regional_risk/api/routes_regions.py
import logging
from typing import List

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from regional_risk.core.errors import RegionNotFound
from regional_risk.schemas.region_schema import ProcessedRegion
from regional_risk.services.region_service import get_processed_region, load_processed_regions

log = logging.getLogger(__name__)

router = APIRouter()

PROCESS_FAILED = {"error": "Failed to process region data"}
NOT_FOUND = {"error": "Region not found"}


@router.get("", response_model=List[ProcessedRegion])
def list_regions():
    try:
        return load_processed_regions()
    except Exception:
        log.exception("Error processing regions")
        return JSONResponse(status_code=500, content=PROCESS_FAILED)


@router.get("/{region_name}", response_model=ProcessedRegion)
def read_region(region_name: str):
    """
    /api/regions/{region_name}
    e.g. /api/regions/Souss-Massa (case-insensitive)
    """
    try:
        return get_processed_region(region_name)
    except RegionNotFound:
        return JSONResponse(status_code=404, content=NOT_FOUND)
    except Exception:
        log.exception(f"Error processing region {region_name!r}")
        return JSONResponse(status_code=500, content=PROCESS_FAILED)
