from fastapi import APIRouter
from redis.exceptions import RedisError

from ..infra.redis_client import get_sync_redis

router = APIRouter()


@router.get("/ready")
def ready():
    redis_ok = False
    try:
        redis_ok = bool(get_sync_redis().ping())
    except RedisError:
        pass
    return {"ok": True, "redis_ok": redis_ok}
