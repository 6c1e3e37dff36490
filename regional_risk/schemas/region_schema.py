# regional_risk/schemas/region_schema.py
from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

CATEGORY_KEYS = ("waterborne", "vector_borne", "respiratory", "other")


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class SymptomCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    waterborne: int = Field(..., ge=0)
    vector_borne: int = Field(..., ge=0)
    respiratory: int = Field(..., ge=0)
    other: int = Field(..., ge=0)


class RawRegionRecord(BaseModel):
    """One row of the static region table."""
    model_config = ConfigDict(frozen=True)

    region_name: str
    symptoms: SymptomCounts
    population: int = Field(..., gt=0)
    temperature: float
    humidity: float
    water_quality_index: float
    overall_level: RiskLevel
    overall_score: float

    @field_validator("region_name")
    @classmethod
    def strip_name(cls, v):
        s = v.strip()
        if not s:
            raise ValueError("region_name must be non-empty")
        return s


class CategoryRisk(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float
    level: RiskLevel


class Indicators(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float
    humidity: float
    water_quality_index: float
    population: int


class ProcessedRegion(BaseModel):
    model_config = ConfigDict(frozen=True)

    region_name: str
    overall_score: float
    overall_level: RiskLevel
    categories: Dict[str, CategoryRisk]  # keyed by CATEGORY_KEYS
    indicators: Indicators
    normalized: Dict[str, float]  # per 10,000 population
