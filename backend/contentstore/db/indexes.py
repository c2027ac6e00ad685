"""
Authoritative index table for the content store.

Ops scripts and database administration should treat this table as the
persisted schema. Order matters: indexes are declared in the order listed.
"""
from dataclasses import dataclass
from typing import List, Tuple

from pymongo import ASCENDING, DESCENDING

IndexKeys = Tuple[Tuple[str, int], ...]


@dataclass(frozen=True)
class IndexSpec:
    collection: str
    keys: IndexKeys
    unique: bool = False

    @property
    def name(self) -> str:
        # Same naming scheme the server uses for unnamed indexes
        return "_".join(f"{field}_{direction}" for field, direction in self.keys)

    def options(self) -> dict:
        if self.unique:
            return {"unique": True}
        return {}


INDEX_SPECS: Tuple[IndexSpec, ...] = (
    IndexSpec("pages", (("slug", ASCENDING),), unique=True),
    IndexSpec("pages", (("tags", ASCENDING),)),
    # Most recent version of a page is a prefix scan
    IndexSpec("versions", (("pageId", ASCENDING), ("createdAt", DESCENDING))),
    IndexSpec("videos", (("searchText", ASCENDING),)),
    # Source URL / embed target, avoids re-fetching the same video
    IndexSpec("videos", (("video", ASCENDING),)),
    IndexSpec("redirects", (("from", ASCENDING),), unique=True),
)


def specs_for(collection: str) -> List[IndexSpec]:
    return [spec for spec in INDEX_SPECS if spec.collection == collection]
