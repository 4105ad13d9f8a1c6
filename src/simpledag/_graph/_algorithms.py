"""Graph algorithms shared by vertices and graphs.

The functions here are generic over the node type and take the adjacency as a
callable, so they work equally on ``Vertex`` objects and on plain mappings.
"""

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def collect_reachable(
    start: T,
    neighbors: Callable[[T], Iterable[T]],
    into: set[T] | None = None,
) -> set[T]:
    """Collect every node transitively reachable from ``start``.

    ``start`` itself is not added. Nodes already present in ``into`` are
    treated as visited and are not expanded again.

    Args:
        start: Node to start from.
        neighbors: Function returning the direct neighbours of a node.
        into: Set to accumulate into. A new set is created when omitted.

    Returns:
        The accumulator set.

    Example:
        >>> graph = {"a": ["b"], "b": ["c"], "c": []}
        >>> sorted(collect_reachable("a", graph.__getitem__))
        ['b', 'c']

    """
    result: set[T] = set() if into is None else into
    stack = list(neighbors(start))
    while stack:
        current = stack.pop()
        if current not in result:
            result.add(current)
            stack.extend(neighbors(current))
    return result


def has_path(start: T, target: T, neighbors: Callable[[T], Iterable[T]]) -> bool:
    """Check whether ``target`` can be reached from ``start`` in one or more steps.

    Args:
        start: Node to start from.
        target: Node to look for.
        neighbors: Function returning the direct neighbours of a node.

    Returns:
        True if a path of length one or more exists.

    """
    visited: set[T] = set()
    stack = [start]
    while stack:
        current = stack.pop()
        for neighbor in neighbors(current):
            if neighbor == target:
                return True
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append(neighbor)
    return False


def topological_sort(nodes: Iterable[T], successors: Callable[[T], Iterable[T]]) -> list[T]:
    """Sort nodes so that every node precedes its successors.

    Runs a depth-first search from each unvisited node in ``nodes`` order and
    returns the reverse post-order. The traversal uses an explicit stack, so
    long chains do not hit the recursion limit.

    The input must be acyclic; cycles are not detected.

    Args:
        nodes: All nodes, in the order the search should start from them.
        successors: Function returning the direct successors of a node.

    Returns:
        List of nodes in topological order.

    Example:
        >>> graph = {"a": ["b"], "b": ["c"], "c": []}
        >>> topological_sort(["c", "b", "a"], graph.__getitem__)
        ['a', 'b', 'c']

    """
    order: list[T] = []
    visited: set[T] = set()

    for root in nodes:
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, iter(successors(root)))]
        while stack:
            node, pending = stack[-1]
            for child in pending:
                if child not in visited:
                    visited.add(child)
                    stack.append((child, iter(successors(child))))
                    break
            else:
                stack.pop()
                order.append(node)

    order.reverse()
    return order
