"""
Transformation Layer Schemas

Shapes written to disk: the full ordinance record and its index summary.
Dates are calendar dates in Japan time and serialize as YYYY-MM-DD.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class JoreiRecord(BaseModel):
    """Normalized ordinance record, one JSON file per record"""

    collection: List[str] = Field(default_factory=list)
    collected_date: List[str] = Field(default_factory=list)
    updated_date: List[date] = Field(
        default_factory=list, description="Revision history dates"
    )
    municipality_id: str
    prefecture: Optional[str] = None
    city: Optional[str] = None
    prefecture_kana: Optional[str] = None
    city_kana: Optional[str] = None
    municipality_type: str
    area: str
    id: str
    reiki_id: str
    h1: Optional[str] = None
    title: str
    announcement_date: Optional[date] = None
    jorei_type: str
    last_updated_date: Optional[date] = None
    reiki_dates: Optional[List[str]] = None
    reiki_numbers: Optional[List[str]] = None
    original_url: Optional[str] = None
    reiki_url: Optional[str] = None
    has_version: bool
    file_type: str = Field(..., description="Content file classification")
    h_type: List[str] = Field(default_factory=list)
    content: Optional[str] = None
    collected_date_s: Optional[str] = None
    announcement_date_s: Optional[str] = None
    last_updated_date_s: Optional[str] = None
    updated_date_s: Optional[str] = None


class IndexEntry(BaseModel):
    """Summary line for the index artifact"""

    title: str
    reiki_id: str
    id: str
    prefecture: Optional[str] = None
    city: Optional[str] = None
    announcement_date: Optional[date] = None
    updated_date: Optional[date] = Field(
        None, description="Taken from the record's last_updated_date"
    )
