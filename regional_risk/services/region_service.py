# regional_risk/services/region_service.py
import json
import logging
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
from pydantic import ValidationError

from regional_risk.core.config import settings
from regional_risk.core.errors import DataUnavailable, InvalidInput, RegionNotFound
from regional_risk.schemas.region_schema import (
    CATEGORY_KEYS,
    Indicators,
    ProcessedRegion,
    RawRegionRecord,
)
from regional_risk.services.category_scorer import CategoryScorer, default_scorer

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

# rates are expressed per this many inhabitants
RATE_BASE = 10000


# =========================
#   Normalization
# =========================
def normalize_symptoms(symptoms: float, population: float) -> float:
    """
    Symptom count per 10,000 population, rounded to 1 decimal.
    Rounding (halves up) happens here only, so every caller reports the same value.
    """
    if population is None or population <= 0:
        raise InvalidInput(f"population must be > 0, got {population!r}")
    if symptoms is None or symptoms < 0:
        raise InvalidInput(f"symptoms must be >= 0, got {symptoms!r}")
    rate = (symptoms / population) * RATE_BASE
    return float(np.floor(rate * 10 + 0.5) / 10)


# =========================
#   Loading
# =========================
def _read_rows(path: Path) -> list:
    try:
        with open(path, encoding="utf-8") as f:
            rows = json.load(f)
    except FileNotFoundError as e:
        raise DataUnavailable(f"region dataset not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise DataUnavailable(f"region dataset unreadable: {path}: {e}") from e
    if not isinstance(rows, list):
        raise DataUnavailable(f"region dataset must be a JSON array: {path}")
    return rows


def load_regions(path: Optional[PathLike] = None) -> List[RawRegionRecord]:
    """Raw region records, in source order."""
    path = Path(path) if path is not None else settings.DATA_PATH
    rows = _read_rows(path)

    records: List[RawRegionRecord] = []
    seen = set()
    for i, row in enumerate(rows):
        try:
            rec = RawRegionRecord.model_validate(row)
        except ValidationError as e:
            raise DataUnavailable(f"malformed region row #{i} in {path}: {e}") from e
        if rec.region_name in seen:
            raise DataUnavailable(f"duplicate region_name {rec.region_name!r} in {path}")
        seen.add(rec.region_name)
        records.append(rec)

    log.debug(f"Loaded {len(records)} regions from {path}")
    return records


def to_processed_region(record: RawRegionRecord, scorer: Optional[CategoryScorer] = None) -> ProcessedRegion:
    scorer = scorer or default_scorer
    symptoms = record.symptoms.model_dump()
    return ProcessedRegion(
        region_name=record.region_name,
        overall_score=record.overall_score,
        overall_level=record.overall_level,
        categories=scorer.score(record),
        indicators=Indicators(
            temperature=record.temperature,
            humidity=record.humidity,
            water_quality_index=record.water_quality_index,
            population=record.population,
        ),
        normalized={k: normalize_symptoms(symptoms[k], record.population) for k in CATEGORY_KEYS},
    )


def load_processed_regions(
    path: Optional[PathLike] = None,
    scorer: Optional[CategoryScorer] = None,
) -> List[ProcessedRegion]:
    """One ProcessedRegion per raw record, same order."""
    return [to_processed_region(r, scorer) for r in load_regions(path)]


def get_processed_region(region_name: str, path: Optional[PathLike] = None) -> ProcessedRegion:
    wanted = region_name.strip().casefold()
    for region in load_processed_regions(path):
        if region.region_name.casefold() == wanted:
            return region
    raise RegionNotFound(region_name)
