from typing import List


def split_evenly(total: int, count: int) -> List[int]:
    """
    Split an integer total into `count` integer shares.

    The remainder of the division goes one unit at a time to the earliest
    shares, so sum(shares) == total exactly.
    """
    if count <= 0:
        return []

    base, remainder = divmod(total, count)
    return [base + 1 if i < remainder else base for i in range(count)]
