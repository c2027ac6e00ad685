from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from dateutil.parser import parse
from pymongo import DESCENDING
from pymongo.collection import Collection

from contentstore.models.version import VersionRecord


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def snapshot_page(page: Dict[str, Any]) -> Dict[str, Any]:
    # The version gets its own _id; the page's id travels as pageId
    return {key: value for key, value in page.items() if key != "_id"}


def build_version(
    *,
    author: str,
    page: Optional[Dict[str, Any]] = None,
    area: Optional[Dict[str, Any]] = None,
    area_id: Optional[Any] = None,
    created_at: Union[datetime, str, None] = None,
) -> Dict[str, Any]:
    """
    Build the version document for a page or a standalone area.

    When an area lives in a page, pass the page: the whole page is
    versioned. Pass ``area`` with ``area_id`` only for independently
    stored areas.
    """
    if created_at is None:
        created_at = datetime.now(timezone.utc)
    elif isinstance(created_at, str):
        created_at = parse(created_at)
    created_at = normalize_ts(created_at)

    if page is not None:
        record = VersionRecord(
            author=author,
            created_at=created_at,
            payload=snapshot_page(page),
            page_id=page["_id"],
        )
    elif area is not None:
        if area_id is None:
            raise ValueError("area_id is required when versioning a standalone area")
        record = VersionRecord(
            author=author,
            created_at=created_at,
            payload=dict(area),
            area_id=area_id,
        )
    else:
        raise ValueError("Either page or area must be given")

    return record.to_document()


def version_history(
    versions: Collection,
    *,
    page_id: Optional[Any] = None,
    area_id: Optional[Any] = None,
    limit: int = 0,
) -> List[Dict[str, Any]]:
    """
    Versions of one page or area, newest first.

    For pages the sort matches the (pageId, createdAt desc) index, so the
    server walks the index instead of sorting.
    """
    if (page_id is None) == (area_id is None):
        raise ValueError("Pass exactly one of page_id or area_id")

    criteria = {"pageId": page_id} if page_id is not None else {"areaId": area_id}
    cursor = versions.find(criteria).sort("createdAt", DESCENDING)
    if limit:
        cursor = cursor.limit(limit)
    return list(cursor)
