"""Extension points for analyses that are not implemented yet.

The analyzer exposes ``scan_auth_gaps`` and ``check_storage_collisions`` as
stable entry points. Each one delegates to a pluggable implementation of
the ABCs below; the defaults do no analysis and return an empty / negative
result, so callers can depend on the entry points today and pick up real
implementations later without an API change.
"""

from sanctifier.core.extensions.auth import AuthGapScanner, NoopAuthGapScanner
from sanctifier.core.extensions.storage import (
    NoopStorageCollisionChecker,
    StorageCollisionChecker,
)

__all__ = [
    "AuthGapScanner",
    "NoopAuthGapScanner",
    "NoopStorageCollisionChecker",
    "StorageCollisionChecker",
]
