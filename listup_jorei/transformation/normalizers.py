"""
Record Normalizers - Transform Layer

Pure functions turning raw API documents into persisted records.
"""

from datetime import date, datetime
from typing import Optional

from ..coreutils.errors import DecodeError
from ..coreutils.time import utc_to_jst_date
from ..extract.schemas import JoreiDoc
from .schemas import IndexEntry, JoreiRecord


def to_internal_date(instant: datetime) -> date:
    """UTC instant -> calendar date in UTC+9"""
    return utc_to_jst_date(instant)


def _optional_date(instant):
    return to_internal_date(instant) if instant is not None else None


def normalize_detail(doc: JoreiDoc, source: Optional[str] = None) -> JoreiRecord:
    """
    Map a raw document to the persisted record shape

    Every field is copied as is except the instants, which become
    calendar dates. The file type is mandatory.

    Args:
        doc: Raw document
        source: Detail URL the document came from, used in error messages

    Raises:
        DecodeError: If the document has no file_type
    """
    if doc.file_type is None:
        raise DecodeError(
            source or f"record {doc.id}",
            f"record {doc.id} is missing required field 'file_type'",
        )

    return JoreiRecord(
        collection=list(doc.collection),
        collected_date=list(doc.collected_date),
        updated_date=[to_internal_date(t) for t in doc.updated_date],
        municipality_id=doc.municipality_id,
        prefecture=doc.prefecture,
        city=doc.city,
        prefecture_kana=doc.prefecture_kana,
        city_kana=doc.city_kana,
        municipality_type=doc.municipality_type,
        area=doc.area,
        id=doc.id,
        reiki_id=doc.reiki_id,
        h1=doc.h1,
        title=doc.title,
        announcement_date=_optional_date(doc.announcement_date),
        jorei_type=doc.jorei_type,
        last_updated_date=_optional_date(doc.last_updated_date),
        reiki_dates=doc.reiki_dates,
        reiki_numbers=doc.reiki_numbers,
        original_url=doc.original_url,
        reiki_url=doc.reiki_url,
        has_version=doc.has_version,
        file_type=doc.file_type,
        h_type=list(doc.h_type),
        content=doc.content,
        collected_date_s=doc.collected_date_s,
        announcement_date_s=doc.announcement_date_s,
        last_updated_date_s=doc.last_updated_date_s,
        updated_date_s=doc.updated_date_s,
    )


def build_index_entry(doc: JoreiDoc) -> IndexEntry:
    return IndexEntry(
        title=doc.title,
        reiki_id=doc.reiki_id,
        id=doc.id,
        prefecture=doc.prefecture,
        city=doc.city,
        announcement_date=_optional_date(doc.announcement_date),
        updated_date=_optional_date(doc.last_updated_date),
    )
