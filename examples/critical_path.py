"""Critical path of a task network.

The longest path through a DAG is the shortest path once every weight is
negated, so the same solver finds the chain of tasks that bounds the total
duration.
"""

from pathlib import Path

import dagpath as dp

graph = dp.load_graph_from_toml(Path(__file__).parent / "build_pipeline.toml")

# Fastest route to a publishable build
fastest = dp.ToposortDAGSolver(graph, "checkout")
print("fastest:", " -> ".join(fastest.solution("publish")), fastest.distance("publish"))

# Critical path: negate weights and solve again
negated = dp.WeightedDigraph.from_edges(dp.Edge(e.from_, e.to, -e.weight) for e in graph.edges)
critical = dp.ToposortDAGSolver(negated, "checkout")
print("critical:", " -> ".join(critical.solution("publish")), -critical.distance("publish"))
