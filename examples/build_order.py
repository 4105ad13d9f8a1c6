"""Build order for a set of targets.

Each target depends on the targets that point to it. The topological sort
gives an order in which every target is built after its dependencies, and a
subgraph narrows the build down to what one target needs.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

import simpledag as sd

TARGETS = {
    "libcore": [],
    "libnet": ["libcore"],
    "libui": ["libcore"],
    "server": ["libcore", "libnet"],
    "client": ["libnet", "libui"],
    "docs": [],
}


def build_graph(targets: dict[str, list[str]]) -> tuple[sd.Graph, dict[str, sd.Vertex]]:
    graph = sd.Graph()
    vertices = {name: graph.create_vertex({"name": name}) for name in targets}
    for name, deps in targets.items():
        for dep in deps:
            graph.add_edge(source=vertices[dep], sink=vertices[name])
    return graph, vertices


if __name__ == "__main__":
    console = Console(stderr=True)
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
    )

    graph, vertices = build_graph(TARGETS)
    print("Full build:", [v["name"] for v in graph.topological_sort()])

    needed = graph.subgraph([vertices["client"]], [])
    print("For client:", [v["name"] for v in needed.topological_sort()])

    affected = graph.subgraph([], [vertices["libnet"]])
    print("Rebuild after libnet changes:", [v["name"] for v in affected.topological_sort()])
