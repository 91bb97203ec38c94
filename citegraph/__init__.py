"""
citegraph

Dense-cluster analysis of directed citation graphs: degree pruning,
forward-reachability components and density ranking.

Usage:
    from citegraph.core import load_edge_list
    from citegraph.analysis import prune, label_components, top_components

    graph = prune(load_edge_list("Cit-HepTh.txt"))
    labels = label_components(graph)
    for component in top_components(graph, labels):
        print(component.component_id, component.density)
"""

__version__ = "1.0.0"
