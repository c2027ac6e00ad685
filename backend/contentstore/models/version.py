from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class VersionRecord:
    """
    Immutable snapshot of a page, or of an independently stored area.

    Written once per putPage / putArea and never updated. ``author`` is a
    plain string so deleting the user does not break the history.
    """

    author: str
    created_at: datetime
    payload: Dict[str, Any] = field(default_factory=dict)
    page_id: Optional[Any] = None
    area_id: Optional[Any] = None

    def __post_init__(self):
        if (self.page_id is None) == (self.area_id is None):
            raise ValueError("A version references exactly one of page_id or area_id")

    def to_document(self) -> Dict[str, Any]:
        doc = dict(self.payload)
        if self.page_id is not None:
            doc["pageId"] = self.page_id
        else:
            doc["areaId"] = self.area_id
        doc["createdAt"] = self.created_at
        doc["author"] = self.author
        return doc
