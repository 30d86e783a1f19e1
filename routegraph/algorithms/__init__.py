"""Graph algorithms operating on `RouteGraph`.

Modules:
    traversal: breadth-first search and connected components.
    structure: tree, forest, chain and cycle classification; bridges.
    degree: degree sequences and sequence realizability checks.
    contraction: vertex merge.
    paths: unweighted, weighted, budgeted and waypoint path searches.
    min_cut: minimum blocking edge set.
"""
