"""Graph traversal, shortest path, topological ordering and index structures."""

from .base import Algorithm
from .data_structures.advanced.segment_tree import SegmentTree
from .data_structures.advanced.trie import Trie, TrieNode
from .data_structures.basic.union_find import UnionFind
from .exceptions import (
    AlgorithmError,
    ConfigurationError,
    CycleDetectedError,
    GraphNotConnectedError,
    IndexOutOfRangeError,
    InvalidRangeError,
    InvalidReferenceError,
    NegativeWeightError,
    NodeNotFoundError,
    PreconditionError,
)
from .graph.advanced.dijkstra import Dijkstra, HeapDijkstra, reconstruct_path, shortest_paths
from .graph.advanced.mst import KruskalMST
from .graph.advanced.topological_sort import (
    DFSTopologicalSort,
    KahnTopologicalSort,
    TopologicalOrder,
    topological_sort,
    topological_sort_kahn,
)
from .graph.basic.bfs import BreadthFirstSearch, bfs
from .graph.basic.dfs import DepthFirstSearch, IterativeDepthFirstSearch, dfs, dfs_iterative
from .searching.string.kmp import KMPSearch, build_lps
from .searching.string.rabin_karp import RabinKarpSearch
from .utils import Graph

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "AlgorithmError",
    "BreadthFirstSearch",
    "ConfigurationError",
    "CycleDetectedError",
    "DFSTopologicalSort",
    "DepthFirstSearch",
    "Dijkstra",
    "Graph",
    "GraphNotConnectedError",
    "HeapDijkstra",
    "IndexOutOfRangeError",
    "InvalidRangeError",
    "InvalidReferenceError",
    "IterativeDepthFirstSearch",
    "KMPSearch",
    "KahnTopologicalSort",
    "KruskalMST",
    "NegativeWeightError",
    "NodeNotFoundError",
    "PreconditionError",
    "RabinKarpSearch",
    "SegmentTree",
    "TopologicalOrder",
    "Trie",
    "TrieNode",
    "UnionFind",
    "bfs",
    "build_lps",
    "dfs",
    "dfs_iterative",
    "reconstruct_path",
    "shortest_paths",
    "topological_sort",
    "topological_sort_kahn",
]
