"""Circular arithmetic over 0-based indexes.

Every function moves an index within ``[0, upper_bound)``, wrapping
around instead of clamping. ``upper_bound`` can be thought of as the
length of the sequence being indexed.
"""

from .exceptions import DomainError


def move(offset: int, start: int, upper_bound: int) -> int:
    """Move ``start`` by ``offset`` positions, wrapping at ``upper_bound``.

    Args:
        offset: How far to move, positive or negative
        start: Initial index
        upper_bound: Number of available positions

    Returns:
        The moved index, always in ``[0, upper_bound)``

    Raises:
        DomainError: If upper_bound is not positive
    """
    if upper_bound <= 0:
        raise DomainError(upper_bound)
    return ((start + offset) % upper_bound + upper_bound) % upper_bound


def move_forward_by_many(offset: int, current: int, upper_bound: int) -> int:
    """Move an index forward by ``offset`` positions."""
    return move(offset, current, upper_bound)


def move_back_by_many(offset: int, current: int, upper_bound: int) -> int:
    """Move an index backward by ``offset`` positions."""
    return move(-offset, current, upper_bound)


def move_forward_by_one(current: int, upper_bound: int) -> int:
    """Move an index forward by one."""
    return move_forward_by_many(1, current, upper_bound)


def move_back_by_one(current: int, upper_bound: int) -> int:
    """Move an index backward by one."""
    return move_back_by_many(1, current, upper_bound)


def set_position(position: int, upper_bound: int) -> int:
    """Set an index, wrapping it when it is too large or negative."""
    return move(position, 0, upper_bound)
