"""Cache inspection and invalidation endpoints."""

from typing import Optional
from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends, Query

from ..dependencies import get_cache
from ..services.cache import ResponseCache

router = APIRouter(tags=["cache"])


class TtlRequest(BaseModel):
    """New global TTL for the response cache."""
    ttl: float = Field(..., gt=0, description="TTL in seconds")


@router.get("/cache/stats")
async def get_cache_stats(cache: ResponseCache = Depends(get_cache)):
    """Get size, hit/miss counters and the current TTL."""
    return cache.stats()


@router.put("/cache/ttl")
async def set_cache_ttl(request: TtlRequest, cache: ResponseCache = Depends(get_cache)):
    """Change the global TTL. Entries keep their original store time."""
    cache.set_ttl(request.ttl)
    return {"ttl": cache.ttl}


@router.delete("/cache/{key}")
async def invalidate_key(key: str, cache: ResponseCache = Depends(get_cache)):
    """Drop a single entry."""
    cache.invalidate(key)
    return {"invalidated": key}


@router.delete("/cache")
async def invalidate_many(
    pattern: Optional[str] = Query(None),
    cache: ResponseCache = Depends(get_cache),
):
    """Drop entries whose key contains ``pattern``, or everything without one."""
    if pattern:
        removed = cache.invalidate_pattern(pattern)
        return {"pattern": pattern, "removed": removed}

    removed = cache.stats()["size"]
    cache.clear()
    return {"pattern": None, "removed": removed}
