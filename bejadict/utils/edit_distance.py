"""Bounded edit-distance check used as a ranking signal."""


def within_edit_distance_one(a: str, b: str) -> bool:
    """
    Check whether two strings differ by at most one edit.

    One edit is a single character substitution, insertion or deletion.
    Runs in O(max(len(a), len(b))).

    Args:
        a: First string.
        b: Second string.

    Returns:
        True if ``a == b`` or one edit turns ``a`` into ``b``.
    """
    if a == b:
        return True

    if abs(len(a) - len(b)) > 1:
        return False

    # Walk with `a` as the shorter (or equal length) string
    if len(a) > len(b):
        a, b = b, a

    i = j = 0
    edits = 0
    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            i += 1
            j += 1
            continue

        edits += 1
        if edits > 1:
            return False

        if len(a) == len(b):
            # substitution
            i += 1
            j += 1
        else:
            # insertion into the longer string
            j += 1

    # Dangling trailing character
    if i < len(a) or j < len(b):
        edits += 1

    return edits <= 1
