# fixup/repositories/verification.py
import redis


class VerificationRepository:
    """Consumed verification tokens, kept in Redis until they expire anyway."""

    def __init__(self, client: redis.Redis, ttl: int):
        self.client = client
        self.ttl = ttl

    def is_token_used(self, token: str) -> bool:
        return self.client.exists(token) > 0

    def mark_token_used(self, token: str) -> bool:
        """Return False when the token had already been marked."""
        return bool(self.client.set(token, "", nx=True, ex=self.ttl))
