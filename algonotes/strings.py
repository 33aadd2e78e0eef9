"""String puzzles: repeated patterns, rotations and repeated matches."""

from __future__ import annotations

__all__ = ["repeated_substring_pattern", "rotate_string", "repeated_string_match"]


def repeated_substring_pattern(s: str) -> bool:
    """Return True if ``s`` is built by repeating one of its proper prefixes."""
    n = len(s)
    if n < 2:
        return False
    return any(
        s == s[:size] * (n // size)
        for size in range(1, n // 2 + 1)
        if n % size == 0
    )


def rotate_string(s: str, goal: str) -> bool:
    """Return True if ``goal`` can be obtained by rotating ``s``."""
    return len(s) == len(goal) and goal in s + s


def repeated_string_match(a: str, b: str) -> int:
    """Return the fewest repetitions of ``a`` that contain ``b``, or -1.

    Raises ValueError if ``a`` is empty while ``b`` is not, since no number
    of repetitions can ever reach the length of ``b``.
    """
    if not a and b:
        raise ValueError("cannot repeat an empty string to match a non-empty one")
    count = -(-len(b) // len(a)) if a else 0
    repeated = a * count
    if b in repeated:
        return count
    if b in repeated + a:
        return count + 1
    return -1