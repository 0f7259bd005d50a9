"""Route Dependencies — shared handler instances injected via Depends.

Invariants:
    - One Datasource per process; it holds no mutable state, so sharing is safe
    - Tests swap it through app.dependency_overrides[get_datasource]
"""

from functools import lru_cache

from solarnetwork_datasource.services.datasource import Datasource


@lru_cache
def get_datasource() -> Datasource:
    return Datasource()
