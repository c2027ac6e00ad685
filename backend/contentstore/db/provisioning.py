from logging import Logger
from typing import Dict, List, Optional

from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import CollectionInvalid
from pymongo.write_concern import WriteConcern

from .collections import COLLECTION_NAMES, Collections
from .indexes import specs_for

# Index builds must be acknowledged before later writes may rely on them
SAFE = WriteConcern(w=1)


def _acquire(db: Database, name: str) -> Collection:
    if name not in db.list_collection_names():
        try:
            db.create_collection(name)
        except CollectionInvalid:
            pass  # already exists
    return db.get_collection(name)


def _ensure_indexes(collection: Collection, logical_name: str) -> List[str]:
    safe = collection.with_options(write_concern=SAFE)
    names = []
    for spec in specs_for(logical_name):
        names.append(safe.create_index(list(spec.keys), name=spec.name, **spec.options()))
    return names


def init_collections(db: Database, logger: Optional[Logger] = None) -> Collections:
    """
    Create the content store collections and their indexes, in order.
    The first driver error propagates unchanged. Safe to repeat.
    """
    handles: Dict[str, Collection] = {}

    for logical_name, physical_name in COLLECTION_NAMES.items():
        collection = _acquire(db, physical_name)
        index_names = _ensure_indexes(collection, logical_name)
        handles[logical_name] = collection

        if logger is not None:
            logger.info(
                "Provisioned collection %s (%s) indexes=%s",
                logical_name, physical_name, index_names,
            )

    return Collections(**handles)
