"""
ids.py
──────
Reminder id generation.

An id is "id" + wall-clock milliseconds + a random number below 10000.
Collisions are possible in theory but not expected at this scale.
"""

import time
import random


def make_id() -> str:
    millis = time.time_ns() // 1_000_000
    return f"id{millis}{random.randrange(10000)}"
