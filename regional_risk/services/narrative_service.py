# regional_risk/services/narrative_service.py
import logging
from typing import Dict, List, Sequence

import numpy as np

from regional_risk.core.errors import InvalidInput
from regional_risk.prompts.minister_prompt import (
    ALERT_TMPL,
    MINISTER_SYSTEM,
    NATIONAL_TMPL,
    REGION_TMPL,
)
from regional_risk.schemas.region_schema import CATEGORY_KEYS, ProcessedRegion, RiskLevel
from regional_risk.services.gemini_client import GenerationResult, request_generation

log = logging.getLogger(__name__)

# rendered when an alert is raised but no single category is HIGH
NO_HIGH_CATEGORY = "multiple categories"


def _num(v: float):
    """52.0 -> 52, 21.4 -> 21.4 (keeps prompt numbers as written in the dataset)."""
    f = float(v)
    return int(f) if f.is_integer() else f


def _category_label(key: str) -> str:
    return key.replace("_", "-")


def _names(regions: Sequence[ProcessedRegion]) -> str:
    return ", ".join(r.region_name for r in regions) or "none"


# =========================
#   Prompt builders
# =========================
def build_region_prompt(region: ProcessedRegion) -> str:
    fields: Dict[str, object] = {
        "system": MINISTER_SYSTEM,
        "region_name": region.region_name,
        "overall_level": region.overall_level.value,
        "overall_score": _num(region.overall_score),
        "temperature": _num(region.indicators.temperature),
        "humidity": _num(region.indicators.humidity),
        "water_quality_index": _num(region.indicators.water_quality_index),
        "population": region.indicators.population,
    }
    for key in CATEGORY_KEYS:
        cat = region.categories[key]
        fields[f"{key}_level"] = cat.level.value
        fields[f"{key}_score"] = _num(cat.score)
        fields[f"norm_{key}"] = _num(region.normalized[key])
    return REGION_TMPL.format(**fields)


def build_alert_prompt(region: ProcessedRegion) -> str:
    high = [_category_label(k) for k in CATEGORY_KEYS if region.categories[k].level == RiskLevel.HIGH]
    return ALERT_TMPL.format(
        system=MINISTER_SYSTEM,
        region_name=region.region_name,
        overall_score=_num(region.overall_score),
        high_categories=", ".join(high) or NO_HIGH_CATEGORY,
        temperature=_num(region.indicators.temperature),
        humidity=_num(region.indicators.humidity),
        water_quality_index=_num(region.indicators.water_quality_index),
    )


def build_national_prompt(regions: Sequence[ProcessedRegion]) -> str:
    if not regions:
        raise InvalidInput("national summary needs at least one region")

    groups: Dict[RiskLevel, List[ProcessedRegion]] = {lvl: [] for lvl in RiskLevel}
    for r in regions:
        groups[r.overall_level].append(r)

    def avg(key: str) -> float:
        return float(np.mean([r.categories[key].score for r in regions]))

    return NATIONAL_TMPL.format(
        system=MINISTER_SYSTEM,
        total=len(regions),
        high_count=len(groups[RiskLevel.HIGH]),
        high_names=_names(groups[RiskLevel.HIGH]),
        medium_count=len(groups[RiskLevel.MEDIUM]),
        medium_names=_names(groups[RiskLevel.MEDIUM]),
        low_count=len(groups[RiskLevel.LOW]),
        low_names=_names(groups[RiskLevel.LOW]),
        avg_waterborne=avg("waterborne"),
        avg_vector_borne=avg("vector_borne"),
        avg_respiratory=avg("respiratory"),
    )


# =========================
#   Generation
# =========================
def generate_region_explanation_result(region: ProcessedRegion) -> GenerationResult:
    return request_generation(build_region_prompt(region))


def generate_alert_message_result(region: ProcessedRegion) -> GenerationResult:
    if region.overall_level != RiskLevel.HIGH:
        log.info(f"Alert requested for {region.region_name} at level {region.overall_level.value}")
    return request_generation(build_alert_prompt(region))


def generate_national_summary_result(regions: Sequence[ProcessedRegion]) -> GenerationResult:
    return request_generation(build_national_prompt(regions))


def generate_region_explanation(region: ProcessedRegion) -> str:
    """2-3 sentence first-person assessment of one region."""
    return generate_region_explanation_result(region).render()


def generate_alert_message(region: ProcessedRegion) -> str:
    """2-sentence alert bulletin; callers only ask for this on HIGH regions."""
    return generate_alert_message_result(region).render()


def generate_national_summary(regions: Sequence[ProcessedRegion]) -> str:
    """3-4 sentence national briefing. Raises InvalidInput on an empty list."""
    return generate_national_summary_result(regions).render()
