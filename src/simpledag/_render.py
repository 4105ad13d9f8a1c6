"""Dependency trees and Rich rendering for inspecting a graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from ._graph import Graph, Vertex


@dataclass(slots=True)
class TreeNode:
    """A vertex in a dependency tree for rendering."""

    vertex: Vertex
    children: list[TreeNode]


def build_vertex_tree(
    vertex: Vertex,
    *,
    invert: bool = False,
    max_depth: int | None = None,
) -> TreeNode:
    """Build a tree of the vertices reachable from ``vertex``.

    Each vertex appears at most once; a vertex reached again through another
    branch is left out.

    Args:
        vertex: The root of the tree.
        invert: If False, follow successors. If True, follow predecessors.
        max_depth: Maximum depth to traverse (None for unlimited).

    Returns:
        TreeNode rooted at ``vertex``.

    """
    root = TreeNode(vertex=vertex, children=[])
    visited = {vertex}
    stack = [(root, 0, iter(_neighbors(vertex, invert=invert)))]

    while stack:
        node, depth, pending = stack[-1]
        if max_depth is not None and depth >= max_depth:
            stack.pop()
            continue
        for neighbor in pending:
            if neighbor not in visited:
                visited.add(neighbor)
                child = TreeNode(vertex=neighbor, children=[])
                node.children.append(child)
                stack.append((child, depth + 1, iter(_neighbors(neighbor, invert=invert))))
                break
        else:
            stack.pop()

    return root


def _neighbors(vertex: Vertex, *, invert: bool) -> list[Vertex]:
    return vertex.predecessors() if invert else vertex.successors()


def render_tree(tree_node: TreeNode, console: Console, label: Callable[[Vertex], str] = repr) -> None:
    """Render a dependency tree using Rich Tree.

    Args:
        tree_node: TreeNode root to render.
        console: Rich Console to output to.
        label: Function producing the text shown for a vertex.

    """
    console.print(to_rich_tree(tree_node, label))


def to_rich_tree(tree_node: TreeNode, label: Callable[[Vertex], str] = repr) -> Tree:
    """Convert a dependency tree to a Rich Tree, keeping child order."""
    rich_tree = Tree(f"[bold]{escape(label(tree_node.vertex))}[/bold]")
    stack = [(rich_tree, tree_node)]
    while stack:
        parent, node = stack.pop()
        for child in node.children:
            stack.append((parent.add(escape(label(child.vertex))), child))
    return rich_tree


def render_vertex_table(graph: Graph, console: Console, label: Callable[[Vertex], str] = repr) -> None:
    """Render the vertices of a graph in topological order as a Rich table.

    Args:
        graph: Graph to render.
        console: Rich Console to output to.
        label: Function producing the text shown for a vertex.

    """
    if not len(graph):
        console.print("[dim]Graph has no vertices[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Vertex", style="bold")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")

    for index, vertex in enumerate(graph.topological_sort(), start=1):
        table.add_row(str(index), escape(label(vertex)), str(vertex.in_degree), str(vertex.out_degree))

    console.print(table)
    console.print(f"\n[dim]Total: {len(graph)} vertices, {len(graph.edges)} edges[/dim]")
