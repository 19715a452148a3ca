"""Group a line diff into context-padded hunks"""

from tmpldiff.core.models import Added, Diff, Hunk, Removed, Unchanged, is_change


def change_distances(diff: Diff) -> list[int | None]:
    """Distance from each op to the nearest change; 0 for changes, None if there are none."""
    distances: list[int | None] = [None] * len(diff)

    last = None
    for i, op in enumerate(diff):
        if is_change(op):
            last = i
        if last is not None:
            distances[i] = i - last

    last = None
    for i in range(len(diff) - 1, -1, -1):
        if is_change(diff[i]):
            last = i
        if last is not None and (distances[i] is None or last - i < distances[i]):
            distances[i] = last - i

    return distances


def extract_hunks(diff: Diff, context: int) -> list[Hunk]:
    """Split diff into hunks keeping up to `context` unchanged lines around each change.

    Unchanged lines further than `context` from every change are dropped and
    separate hunks. Returns [] when the diff has no changes.
    """
    if context < 0:
        raise ValueError(f"context must be non-negative, got {context}")

    hunks: list[Hunk] = []
    left = right = 0
    start: tuple[int, int] | None = None
    ops: list = []

    for op, distance in zip(diff, change_distances(diff)):
        keep = distance is not None and distance <= context
        if keep and start is None:
            start = (left, right)
        if keep:
            ops.append(op)
        elif start is not None:
            hunks.append(Hunk(start[0], start[1], tuple(ops)))
            start, ops = None, []

        match op:
            case Removed():
                left += 1
            case Added():
                right += 1
            case Unchanged():
                left += 1
                right += 1

    if start is not None:
        hunks.append(Hunk(start[0], start[1], tuple(ops)))
    return hunks
