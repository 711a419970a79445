# fixup/core/snowflake.py
import threading
import time

EPOCH_MS = 1288834974657
NODE_BITS = 10
STEP_BITS = 12

MAX_NODE = (1 << NODE_BITS) - 1
STEP_MASK = (1 << STEP_BITS) - 1
TIME_SHIFT = NODE_BITS + STEP_BITS


class SnowflakeNode:
    """Time-ordered 63-bit id generator: ms timestamp | node | sequence."""

    def __init__(self, node_id: int, clock=None):
        if not 0 <= node_id <= MAX_NODE:
            raise ValueError(f"node id must be between 0 and {MAX_NODE}")
        self.node_id = node_id
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._lock = threading.Lock()
        self._last_ms = -1
        self._step = 0

    def generate(self) -> int:
        with self._lock:
            now = self._clock()
            if now < self._last_ms:
                now = self._last_ms

            if now == self._last_ms:
                self._step = (self._step + 1) & STEP_MASK
                if self._step == 0:
                    # sequence exhausted for this millisecond
                    while now <= self._last_ms:
                        now = self._clock()
            else:
                self._step = 0

            self._last_ms = now
            return ((now - EPOCH_MS) << TIME_SHIFT) | (self.node_id << STEP_BITS) | self._step
