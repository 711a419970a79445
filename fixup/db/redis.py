# fixup/db/redis.py
import redis

from fixup.core.config import settings

redis_client = redis.Redis.from_url(settings.redis.url, decode_responses=True)


def get_redis() -> redis.Redis:
    return redis_client
