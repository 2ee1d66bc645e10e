"""Creation-time record IDs."""
import time
from typing import Iterable


def generate_id(taken: Iterable[int] = ()) -> int:
    """Millisecond timestamp, bumped until it is not already in use."""
    taken = set(taken)
    new_id = int(time.time() * 1000)
    while new_id in taken:
        new_id += 1
    return new_id
