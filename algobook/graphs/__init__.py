"""Graph algorithms: grid searches, components, union-find, cycles, shortest paths, DAGs and Euler circuits."""