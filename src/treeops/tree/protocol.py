"""Structural protocol for trees and the enumeration orders."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, TypeVar, Union, runtime_checkable


@runtime_checkable
class Tree(Protocol):
    """Anything exposing an ordered, mutable list of children of its own kind."""

    children: list


T = TypeVar("T", bound=Tree)


class SearchOrder(str, Enum):
    """Enumeration order over a forest."""

    DEPTH_FIRST = "depth-first"
    BREADTH_FIRST = "breadth-first"

    def __str__(self) -> str:
        return self.value


OrderLike = Union[SearchOrder, str]


def parse_order(order: OrderLike) -> SearchOrder:
    """Coerce a literal order string into a SearchOrder.

    Args:
        order: A SearchOrder member or one of "depth-first" / "breadth-first"

    Returns:
        SearchOrder: The matching member

    Raises:
        ValueError: If the value is not a known order
    """
    try:
        return SearchOrder(order)
    except ValueError:
        accepted = ", ".join(f"'{o.value}'" for o in SearchOrder)
        raise ValueError(
            f"Unknown search order {order!r}, expected one of {accepted}"
        ) from None
