from typing import List, Sequence, Tuple

from schedcore.events import Execution, Interval

from .theme import CPU_IDLE, TASK_COLORS

# (label, start, end, order); order is -1 for idle
Segment = Tuple[str, int, int, int]


def pid_color(pid: str):
    """Deterministic, vibrant colors per PID."""
    if pid == "IDLE":
        return CPU_IDLE

    # Stable hash -> palette index
    h = 2166136261  # FNV-1a seed
    for ch in pid:
        h ^= ord(ch)
        h = (h * 16777619) & 0xFFFFFFFF

    base = TASK_COLORS[h % len(TASK_COLORS)]

    # Tiny brightness variation so similar PIDs still look a bit different.
    bump = ((h >> 8) % 26) - 13  # -13..+12
    r = max(0, min(255, base[0] + bump))
    g = max(0, min(255, base[1] + bump))
    b = max(0, min(255, base[2] + bump))
    return (r, g, b)


def segments(intervals: Sequence[Interval]) -> List[Segment]:
    """One segment per interval; back-to-back slices of one process are merged."""
    segs: List[Segment] = []
    for i in intervals:
        if isinstance(i, Execution):
            label, order = i.process, i.order
        else:
            label, order = "IDLE", -1
        if segs and segs[-1][0] == label and segs[-1][3] == order and segs[-1][2] == i.start:
            segs[-1] = (label, segs[-1][1], i.end, order)
        else:
            segs.append((label, i.start, i.end, order))
    return segs


def px_per_unit(width: int, total_time: int, lo: int = 4, hi: int = 40) -> int:
    return max(lo, min(hi, width // max(1, total_time)))


def tick_step(total_time: int, max_markers: int = 16) -> int:
    return max(1, total_time // max_markers)
