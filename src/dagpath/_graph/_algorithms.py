"""Graph algorithms for weighted digraph operations."""

from collections import defaultdict, deque
from collections.abc import Collection, Hashable, Iterator, Mapping

from ._edge import Digraph, Edge


class CycleError(ValueError):
    """Raised when a graph expected to be acyclic contains a cycle.

    Attributes:
        cycle: The vertices of one cycle, first vertex repeated at the end,
            when the traversal that found it can name it.
        remaining: Vertices that could not be ordered because they lie on
            or behind a cycle, when the whole graph was sorted.

    """

    def __init__(
        self,
        cycle: list[Hashable] | None = None,
        remaining: frozenset[Hashable] | None = None,
    ) -> None:
        self.cycle = cycle or []
        self.remaining = remaining or frozenset()
        if self.cycle:
            path = " -> ".join(str(v) for v in self.cycle)
            super().__init__(f"Cycle detected in graph: {path}")
        elif self.remaining:
            names = ", ".join(sorted(str(v) for v in self.remaining))
            super().__init__(f"Cycle detected in graph among: {names}")
        else:
            super().__init__("Cycle detected in graph")


def topological_sort[T: Hashable](successors: Mapping[T, Collection[T]]) -> list[T]:
    """Sort a whole graph topologically (sources before their targets).

    Given a graph represented as a mapping from nodes to their successors,
    return nodes in an order where each node appears before all of its
    successors.

    Args:
        successors: Mapping from node to the collection of nodes it points to.

    Returns:
        List of nodes in topological order.

    Raises:
        CycleError: If the graph contains a cycle. Its ``remaining`` attribute
            holds the nodes left unordered.

    Example:
        >>> topological_sort({"a": ["b"], "b": ["c"], "c": []})
        ['a', 'b', 'c']

    """
    # Calculate in-degree for each node
    indegree: defaultdict[T, int] = defaultdict(int)
    for node, targets in successors.items():
        indegree[node] = indegree.get(node, 0)
        for target in targets:
            indegree[target] += 1

    # Start with nodes that have no predecessors (in-degree 0)
    queue = deque([node for node, deg in indegree.items() if deg == 0])
    order: list[T] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for successor in successors.get(node, []):
            indegree[successor] -= 1
            if indegree[successor] == 0:
                queue.append(successor)

    if len(order) != len(indegree):
        # Vertices still holding in-degree sit on a cycle or downstream of one
        raise CycleError(remaining=frozenset(node for node, deg in indegree.items() if deg > 0))

    return order


def dfs_post_order[V: Hashable](graph: Digraph[V], start: V) -> list[V]:
    """Collect the vertices reachable from ``start`` in depth-first post-order.

    The traversal is iterative, so its depth is not bounded by the interpreter
    recursion limit, but it yields exactly the order a recursive DFS would:
    neighbors are visited in the order ``graph.neighbors`` reports them and a
    vertex is emitted only after all of its unvisited neighbors finished.

    Args:
        graph: The graph to traverse.
        start: The vertex to start from.

    Returns:
        Every vertex reachable from ``start`` exactly once, in post-order.

    Raises:
        CycleError: If a cycle is reachable from ``start``.

    """
    visited: set[V] = {start}
    on_stack: set[V] = {start}
    post_order: list[V] = []
    # Each frame holds a vertex and an iterator over its remaining out-edges
    stack: list[tuple[V, Iterator[Edge[V]]]] = [(start, iter(graph.neighbors(start)))]

    while stack:
        vertex, edges = stack[-1]
        for edge in edges:
            target = edge.to
            if target in on_stack:
                raise CycleError(_cycle_from_stack(stack, target))
            if target not in visited:
                visited.add(target)
                on_stack.add(target)
                stack.append((target, iter(graph.neighbors(target))))
                break
        else:
            stack.pop()
            on_stack.discard(vertex)
            post_order.append(vertex)

    return post_order


def reverse_post_order[V: Hashable](graph: Digraph[V], start: V) -> list[V]:
    """Return the vertices reachable from ``start`` in topological order.

    For every edge ``(u, w)`` with ``u`` reachable from ``start``, ``u`` comes
    before ``w`` in the result. ``start`` is always first.

    Example:
        >>> from dagpath import WeightedDigraph
        >>> graph = WeightedDigraph.from_edges([("a", "b", 1.0), ("b", "c", 1.0)])
        >>> reverse_post_order(graph, "a")
        ['a', 'b', 'c']

    """
    order = dfs_post_order(graph, start)
    order.reverse()
    return order


def _cycle_from_stack[V: Hashable](stack: list[tuple[V, Iterator[Edge[V]]]], target: V) -> list[V]:
    """Extract the cycle closed by an edge back to ``target``."""
    vertices = [vertex for vertex, _ in stack]
    cycle = vertices[vertices.index(target) :]
    cycle.append(target)
    return cycle
