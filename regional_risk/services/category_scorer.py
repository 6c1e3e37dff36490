# regional_risk/services/category_scorer.py
"""
Per-category risk scoring.

The mock dataset only carries one overall score/level per region, so every
category scorer below mirrors that value. A real engine plugs in by
overriding ``score_record`` on the relevant category scorer.
"""
from typing import Dict, Iterable, Optional

from regional_risk.schemas.region_schema import CATEGORY_KEYS, CategoryRisk, RawRegionRecord


class CategoryScorer:
    """Strategy interface: turns a raw record into {category: CategoryRisk}."""

    def score(self, record: RawRegionRecord) -> Dict[str, CategoryRisk]:
        raise NotImplementedError


class SingleCategoryScorer(CategoryScorer):
    category: str = ""

    def score_record(self, record: RawRegionRecord) -> CategoryRisk:
        return CategoryRisk(score=record.overall_score, level=record.overall_level)

    def score(self, record: RawRegionRecord) -> Dict[str, CategoryRisk]:
        return {self.category: self.score_record(record)}


class WaterborneScorer(SingleCategoryScorer):
    category = "waterborne"


class VectorBorneScorer(SingleCategoryScorer):
    category = "vector_borne"


class RespiratoryScorer(SingleCategoryScorer):
    category = "respiratory"


class OtherScorer(SingleCategoryScorer):
    category = "other"


class UniformCategoryScorer(CategoryScorer):
    """Composes one scorer per category, in CATEGORY_KEYS order."""

    def __init__(self, scorers: Optional[Iterable[SingleCategoryScorer]] = None):
        if scorers is None:
            scorers = (WaterborneScorer(), VectorBorneScorer(), RespiratoryScorer(), OtherScorer())
        self._scorers = {s.category: s for s in scorers}
        missing = [k for k in CATEGORY_KEYS if k not in self._scorers]
        if missing:
            raise ValueError(f"missing category scorers: {missing}")

    def score(self, record: RawRegionRecord) -> Dict[str, CategoryRisk]:
        out: Dict[str, CategoryRisk] = {}
        for key in CATEGORY_KEYS:
            out.update(self._scorers[key].score(record))
        return out


default_scorer = UniformCategoryScorer()
