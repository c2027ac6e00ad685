from .collections import COLLECTION_NAMES, Collections
from .errors import error_code, is_unique_error
from .indexes import INDEX_SPECS, IndexSpec, specs_for
from .provisioning import init_collections

__all__ = [
    "COLLECTION_NAMES",
    "Collections",
    "INDEX_SPECS",
    "IndexSpec",
    "error_code",
    "init_collections",
    "is_unique_error",
    "specs_for",
]
