"""Line splitting and line-level alignment of two texts"""

import difflib

from tmpldiff.core.models import Added, Diff, Removed, Unchanged


def split_lines(text: str) -> list[str]:
    """Split on newlines without a trailing empty line; strips a CR before each newline."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def align(base: str, updated: str) -> Diff:
    """Return the line-level edit script turning base into updated."""
    old_lines, new_lines = split_lines(base), split_lines(updated)
    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    diff: Diff = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            diff.extend(Unchanged(l, r) for l, r in zip(old_lines[i1:i2], new_lines[j1:j2]))
            continue
        # replace is emitted as removals followed by additions
        if tag in ("delete", "replace"):
            diff.extend(Removed(l) for l in old_lines[i1:i2])
        if tag in ("insert", "replace"):
            diff.extend(Added(r) for r in new_lines[j1:j2])

    return diff
