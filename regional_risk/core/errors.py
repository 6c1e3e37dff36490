# regional_risk/core/errors.py


class RegionalRiskError(Exception):
    """Base error for the region data and narrative services."""


class DataUnavailable(RegionalRiskError):
    """Region dataset is missing, unreadable or malformed."""


class InvalidInput(RegionalRiskError):
    """Arguments outside the domain of an operation (e.g. population <= 0)."""


class RegionNotFound(RegionalRiskError):
    def __init__(self, region_name: str):
        super().__init__(f"unknown region: {region_name}")
        self.region_name = region_name
