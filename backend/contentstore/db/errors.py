from collections.abc import Mapping

from pymongo.errors import BulkWriteError

# 11000 / 11001: duplicate key on a unique index.
# 13596: attempt to change _id, seen on upserts when the caller assigns _id.
UNIQUE_ERROR_CODES = frozenset({11000, 11001, 13596})


def error_code(err):
    if err is None:
        return None

    if isinstance(err, BulkWriteError):
        write_errors = (err.details or {}).get("writeErrors") or []
        if write_errors:
            return error_code(write_errors[0])

    if isinstance(err, Mapping):
        code = err.get("code")
    else:
        code = getattr(err, "code", None)

    return code if isinstance(code, int) else None


def is_unique_error(err) -> bool:
    """
    Is this database error caused by a uniqueness conflict? Handy for
    retrying with a regenerated key.

    IMPORTANT: account for every unique index before retrying, otherwise
    the retry loop never ends.
    """
    return error_code(err) in UNIQUE_ERROR_CODES
