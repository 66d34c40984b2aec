import json
from barbatch.infra.redis_client import get_sync_redis

def get_json(key: str):
    raw = get_sync_redis().get(key)
    return json.loads(raw) if raw else None

def set_json(key: str, value, ttl_sec: int):
    get_sync_redis().set(key, json.dumps(value), ex=ttl_sec)

def delete_key(key: str):
    get_sync_redis().delete(key)

def get_or_set_json_sync(key: str, ttl_sec: int, compute_func):
    hit = get_json(key)
    if hit is not None:
        return hit, True

    val = compute_func()
    set_json(key, val, ttl_sec)
    return val, False
