"""
Pure algorithms with no graph-class dependencies.

Modules:
    traversal - Lazy BFS/DFS iterator and depth-first generators
    paths     - Weighted shortest path (SPFA)
    spanning  - Minimum spanning tree (Kruskal)
    flow      - Maximum flow over a residual graph (Edmonds-Karp)
"""
