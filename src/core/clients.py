"""Lazy-initialized clients: reused across warm Lambda invocations."""

from functools import lru_cache

from core.config import get_config
from core.db.aurora import AuroraClient


@lru_cache(maxsize=1)
def get_aurora_client() -> AuroraClient:
    client = AuroraClient(get_config())
    client.connect()
    return client
