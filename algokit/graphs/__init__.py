"""Graph algorithms: traversal, colouring, ordering, disjoint sets, shortest paths, spanning trees, union-find problems and grids."""