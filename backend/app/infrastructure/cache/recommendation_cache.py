"""
Recommendation Cache

Redis-backed cache for serialized recommendation lists, keyed by
(user, type, limit). Caching is best-effort: any Redis failure is logged
and treated as a miss, never surfaced to the request.
"""

import json
import logging
from typing import Any, List, Optional

import redis.asyncio as redis

from app.config.settings import get_settings
from app.infrastructure.exceptions import CacheError


logger = logging.getLogger(__name__)


class RecommendationCache:
    """
    Best-effort recommendation cache.
    
    Without a Redis URL (and no injected client) every call is a no-op.
    """
    
    PREFIX = "recommendations"
    
    def __init__(
        self,
        client: Optional[redis.Redis] = None,
        redis_url: Optional[str] = None,
        ttl_seconds: Optional[int] = None,
        key_prefix: Optional[str] = None,
    ):
        settings = get_settings()
        self._client = client
        self._redis_url = redis_url if redis_url is not None else settings.redis_url
        self._ttl = ttl_seconds if ttl_seconds is not None else settings.recommendation_cache_ttl_seconds
        self._key_prefix = key_prefix if key_prefix is not None else settings.cache_key_prefix
    
    @property
    def enabled(self) -> bool:
        return self._client is not None or bool(self._redis_url)
    
    def _get_client(self) -> redis.Redis:
        """
        Lazily create the Redis client.
        
        Raises:
            CacheError: REDIS_URL cannot be parsed
        """
        if self._client is None:
            try:
                self._client = redis.from_url(
                    self._redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
            except ValueError as e:
                raise CacheError("Invalid REDIS_URL", operation="connect", original_error=e) from e
            logger.info("Redis recommendation cache connected")
        return self._client
    
    def key(self, user_id: str, entity_type: str, limit: int) -> str:
        return f"{self._key_prefix}:{self.PREFIX}:{user_id}:{entity_type}:{limit}"
    
    async def get(self, user_id: str, entity_type: str, limit: int) -> Optional[List[Any]]:
        """Cached list, or None on miss or any cache failure."""
        if not self.enabled:
            return None
        key = self.key(user_id, entity_type, limit)
        try:
            raw = await self._read(key)
        except CacheError as e:
            logger.warning(f"Recommendation cache read failed: {e.message} ({e.details})")
            return None
        
        if raw is None:
            logger.debug(f"Cache MISS: {key}")
            return None
        logger.debug(f"Cache HIT: {key}")
        return raw
    
    async def set(self, user_id: str, entity_type: str, limit: int, value: List[Any]) -> bool:
        """Store a list. Returns False (after logging) if the write failed."""
        if not self.enabled:
            return False
        key = self.key(user_id, entity_type, limit)
        try:
            await self._write(key, value)
        except CacheError as e:
            logger.warning(f"Recommendation cache write failed: {e.message} ({e.details})")
            return False
        return True
    
    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
    
    async def _read(self, key: str) -> Optional[List[Any]]:
        client = self._get_client()
        try:
            raw = await client.get(key)
        except (redis.RedisError, OSError) as e:
            raise CacheError("Redis GET failed", key=key, operation="get", original_error=e) from e
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            raise CacheError("Corrupt cache entry", key=key, operation="decode", original_error=e) from e
    
    async def _write(self, key: str, value: List[Any]) -> None:
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise CacheError("Value is not JSON serializable", key=key, operation="encode", original_error=e) from e
        client = self._get_client()
        try:
            await client.setex(key, self._ttl, payload)
        except (redis.RedisError, OSError) as e:
            raise CacheError("Redis SETEX failed", key=key, operation="set", original_error=e) from e
