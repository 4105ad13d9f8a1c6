"""Pedigree chart.

This example builds a small family tree, attaches a domain accessor to every
person with a VertexExtension, and extracts the family around one person.
"""

from rich.console import Console

import simpledag as sd


class Person(sd.VertexExtension):
    @property
    def name(self) -> str:
        return self.payload["name"]


family = sd.Graph(sd.GraphConfig(extension=Person))

ada = family.create_vertex({"name": "ada"})
joe = family.create_vertex({"name": "joe"})
bob = family.create_vertex({"name": "bob"})
jane = family.create_vertex({"name": "jane"})
chris = family.create_vertex({"name": "chris"})

family.add_edge(ada, joe, {"relation": "mother of"})
family.add_edge(joe, bob, {"relation": "father of"})
family.add_edge(joe, jane, {"relation": "father of"})
family.add_edge(bob, jane)
family.add_edge(jane, chris, {"relation": "mother of"})


def label(vertex: sd.Vertex) -> str:
    return vertex.ext.name


if __name__ == "__main__":
    console = Console()

    console.print("[bold]Everyone, eldest first[/bold]")
    sd.render_vertex_table(family, console, label=label)

    console.print("\n[bold]Descendants of joe[/bold]")
    sd.render_tree(sd.build_vertex_tree(joe), console, label=label)

    console.print("\n[bold]Ancestors of jane[/bold]")
    sd.render_tree(sd.build_vertex_tree(jane, invert=True), console, label=label)

    around_bob = family.subgraph([bob], [bob])
    console.print(f"\nAround bob: {sorted(label(v) for v in around_bob.vertices)}")

    try:
        family.add_edge(chris, ada)
    except sd.CycleError as e:
        console.print(f"[red]Rejected:[/red] {e}")
