"""Exception hierarchy shared by every algokit component.

Each error also derives from the closest built-in exception so that callers
can catch ``KeyError``/``IndexError``/``ValueError`` without importing this
module.
"""
from __future__ import annotations

from typing import Any, List, Sequence


class AlgorithmError(Exception):
    """Base class for all algokit exceptions."""


class InvalidReferenceError(AlgorithmError, LookupError):
    """An operation referenced a node, index or path absent from the structure."""


class NodeNotFoundError(InvalidReferenceError, KeyError):
    """A graph node was referenced but has no adjacency entry."""

    def __init__(self, node: Any) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"node {self.node!r} not found in graph"


class IndexOutOfRangeError(InvalidReferenceError, IndexError):
    """An element index lies outside the structure's domain."""

    def __init__(self, index: Any, size: int) -> None:
        super().__init__(index, size)
        self.index = index
        self.size = size

    def __str__(self) -> str:
        return f"index {self.index!r} out of range for size {self.size}"


class PreconditionError(AlgorithmError, ValueError):
    """The input violates a property the algorithm requires."""


class NegativeWeightError(PreconditionError):
    """A weighted graph contains an edge with negative weight."""

    def __init__(self, source: Any, target: Any, weight: float) -> None:
        super().__init__(source, target, weight)
        self.source = source
        self.target = target
        self.weight = weight

    def __str__(self) -> str:
        return f"edge {self.source!r} -> {self.target!r} has negative weight {self.weight!r}"


class InvalidRangeError(PreconditionError):
    """A range query was issued with ``left > right``."""


class GraphNotConnectedError(PreconditionError):
    """The algorithm needs a connected graph."""


class ConfigurationError(AlgorithmError, ValueError):
    """Configuration file or values are invalid."""


class CycleDetectedError(AlgorithmError):
    """Topological ordering is impossible because the graph has a cycle."""

    def __init__(self, order: Sequence[Any], remaining: Sequence[Any]) -> None:
        super().__init__(f"graph contains a cycle through {len(remaining)} node(s)")
        self.order: List[Any] = list(order)
        self.remaining: List[Any] = list(remaining)
