"""
Extract Layer Schemas

Raw response schemas for data coming from the reiki search API.
These represent the structure of the JSON envelope as the API returns it.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, validator


class JoreiDoc(BaseModel):
    """One ordinance document as returned by the API"""

    model_config = ConfigDict(populate_by_name=True)

    collection: List[str] = Field(default_factory=list)
    collected_date: List[str] = Field(default_factory=list)
    updated_date: List[datetime] = Field(
        default_factory=list, description="Revision history instants (UTC)"
    )
    municipality_id: str
    prefecture: Optional[str] = None
    city: Optional[str] = None
    prefecture_kana: Optional[str] = None
    city_kana: Optional[str] = None
    municipality_type: str
    area: str
    id: str = Field(..., description="Globally unique record identifier")
    reiki_id: str
    h1: Optional[str] = None
    title: str
    announcement_date: Optional[datetime] = None
    jorei_type: str = Field(..., alias="type")
    last_updated_date: Optional[datetime] = None
    reiki_dates: Optional[List[str]] = None
    reiki_numbers: Optional[List[str]] = None
    update_count: Optional[int] = None
    original_url: Optional[str] = None
    reiki_url: Optional[str] = None
    has_version: bool
    file_type: Optional[str] = None
    h_type: List[str] = Field(default_factory=list)
    content: Optional[str] = None
    collected_date_s: Optional[str] = None
    announcement_date_s: Optional[str] = None
    last_updated_date_s: Optional[str] = None
    updated_date_s: Optional[str] = None

    @validator("collection", "collected_date", "updated_date", "h_type", pre=True)
    def none_to_empty_list(cls, v):
        """The API sends null for some empty multi-valued fields"""
        if v is None:
            return []
        return v


class ListDoc(BaseModel):
    """Search hit summary; only the id and title are needed for paging"""

    id: str
    title: Optional[str] = None


class ListPage(BaseModel):
    """One page of search results"""

    total_count: int = Field(..., alias="numFound", ge=0)
    start: int = Field(0, ge=0)
    docs: List[ListDoc] = Field(default_factory=list)

    @property
    def record_ids(self) -> List[str]:
        return [doc.id for doc in self.docs]


class ListEnvelope(BaseModel):
    response: ListPage


class DetailResponse(BaseModel):
    total_count: int = Field(0, alias="numFound", ge=0)
    start: int = 0
    docs: List[JoreiDoc] = Field(default_factory=list)


class DetailEnvelope(BaseModel):
    response: DetailResponse
