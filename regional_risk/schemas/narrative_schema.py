# regional_risk/schemas/narrative_schema.py
from typing import Optional

from pydantic import BaseModel, Field


class NarrativeOut(BaseModel):
    text: str
    error: Optional[str] = Field(None, description="generation error kind, null on success")
    region_name: Optional[str] = None
