"""
Flat file persistence for user records.

The whole collection is kept in a single JSON snapshot: an array of
objects with ``id``, ``name`` and ``email`` keys.  ``save_users``
rewrites the snapshot wholesale after every mutation and
``load_users`` reads it back once at startup.  Loading never fails:
a missing, unreadable or malformed snapshot yields an empty
collection so the service can always start.

There is no locking across processes.  Two service instances pointed
at the same file will overwrite each other's snapshots.
"""

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from ..schemas.user import UserRead

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

_users_adapter = TypeAdapter(List[UserRead])


class PersistenceError(RuntimeError):
    """Raised when the snapshot could not be written."""


def resolve_data_path(path: PathLike) -> Path:
    """Return ``path`` as an absolute path, relative ones against the cwd."""
    return Path(path).expanduser().resolve()


def load_users(path: PathLike) -> List[UserRead]:
    """Read the snapshot at ``path`` and return its records in order.

    Returns an empty list when the file does not exist, cannot be read,
    is not UTF‑8 JSON, or does not hold an array of user records with
    distinct identifiers.  Never raises.
    """
    data_path = resolve_data_path(path)
    try:
        raw = data_path.read_bytes()
    except FileNotFoundError:
        logger.info("No snapshot at %s, starting with an empty store", data_path)
        return []
    except OSError as exc:
        logger.warning("Could not read snapshot %s: %s", data_path, exc)
        return []
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (ValueError, RecursionError) as exc:
        logger.warning("Snapshot %s is not valid JSON, ignoring it: %s", data_path, exc)
        return []
    # An empty collection may have been written as ``null``.
    if payload is None:
        return []
    try:
        users = _users_adapter.validate_python(payload)
    except ValidationError as exc:
        logger.warning(
            "Snapshot %s does not contain user records (%d errors), ignoring it",
            data_path,
            exc.error_count(),
        )
        return []
    if len({user.id for user in users}) != len(users):
        logger.warning("Snapshot %s holds duplicate user ids, ignoring it", data_path)
        return []
    logger.info("Loaded %d users from %s", len(users), data_path)
    return users


def save_users(path: PathLike, users: List[UserRead]) -> None:
    """Overwrite the snapshot at ``path`` with the full collection.

    The records are written to a temporary sibling file which then
    replaces the snapshot, so readers never observe a half written
    file.  Raises ``PersistenceError`` if any step fails.
    """
    data_path = resolve_data_path(path)
    records = [{"id": user.id, "name": user.name, "email": user.email} for user in users]
    tmp_path = data_path.with_name(data_path.name + ".tmp")
    try:
        data_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp_path, data_path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise PersistenceError(f"Failed to write snapshot {data_path}: {exc}") from exc
    logger.debug("Saved %d users to %s", len(records), data_path)
