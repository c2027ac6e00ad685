from dataclasses import dataclass, fields
from typing import Dict, Iterator, Tuple

from pymongo.collection import Collection

# Logical name -> physical collection name, in provisioning order
COLLECTION_NAMES: Dict[str, str] = {
    "pages": "aposPages",
    "versions": "aposVersions",
    "files": "aposFiles",
    "videos": "aposVideos",
    "redirects": "aposRedirects",
}


@dataclass(frozen=True)
class Collections:
    """
    Handles to every collection the content store requires.

    Produced once by ``init_collections`` and handed to whatever needs
    database access. Never mutated; re-provisioning builds a new record.
    """

    pages: Collection
    versions: Collection
    files: Collection
    videos: Collection
    redirects: Collection

    def items(self) -> Iterator[Tuple[str, Collection]]:
        for field in fields(self):
            yield field.name, getattr(self, field.name)
