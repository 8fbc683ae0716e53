from typing import Dict, Hashable, Iterable, List, Set


class GraphClosureTracker:
    """
    A dynamic Union-Find (Disjoint Set) data structure over arbitrary hashable
    node identities, with explicit tracking of connected components.

    Nodes are registered lazily the first time they are seen, so the tracker
    can be created empty and fed edges as they are produced.
    """

    def __init__(self, nodes: Iterable[Hashable] = ()):
        """
        Initialize the tracker, optionally pre-registering nodes.

        Parameters
        ----------
        nodes : Iterable[Hashable], optional
            Nodes to register up front as singleton components.
        """

        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}
        self.components: Dict[Hashable, Set[Hashable]] = {}
        for node in nodes:
            self._ensure_registered(node)

    def _ensure_registered(self, node: Hashable) -> None:
        """
        Register a node as its own singleton component if it is new.

        Parameters
        ----------
        node : Hashable
            The node to register.
        """

        if node not in self.parent:
            self.parent[node] = node
            self.rank[node] = 0
            self.components[node] = {node}

    def find(self, node: Hashable) -> Hashable:
        """
        Find the root representative of the set containing the node.

        Parameters
        ----------
        node : Hashable
            The node whose component root is to be found.

        Returns
        -------
        Hashable
            The root node of the component.
        """

        self._ensure_registered(node)
        root = node
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression
        while self.parent[node] != root:
            self.parent[node], node = root, self.parent[node]
        return root

    def union(self, node1: Hashable, node2: Hashable) -> None:
        """
        Merge the components containing node1 and node2.

        Parameters
        ----------
        node1 : Hashable
            First node.
        node2 : Hashable
            Second node.
        """

        root1 = self.find(node1)
        root2 = self.find(node2)
        if root1 == root2:
            return

        # Attach smaller rank tree under the larger rank tree
        if self.rank[root1] < self.rank[root2]:
            root1, root2 = root2, root1
        self.parent[root2] = root1
        if self.rank[root1] == self.rank[root2]:
            self.rank[root1] += 1
        self.components[root1].update(self.components.pop(root2))

    merge = union

    def add_edge(self, node1: Hashable, node2: Hashable) -> None:
        """Add an undirected edge between two nodes by merging their components."""

        self.union(node1, node2)

    def add_fully_connected_subgraph(self, nodes: List[Hashable]) -> None:
        """
        Connect a list of nodes into one component.

        Parameters
        ----------
        nodes : List[Hashable]
            Nodes to be connected.
        """

        for other in nodes[1:]:
            self.union(nodes[0], other)

    def subgraph_is_already_connected(self, nodes: List[Hashable]) -> bool:
        """
        Check whether all nodes in the list belong to the same connected component.

        Parameters
        ----------
        nodes : List[Hashable]
            Nodes to test.

        Returns
        -------
        bool
            True if all nodes are connected, False otherwise.
        """

        if not nodes:
            return True  # Empty list is trivially connected
        root = self.find(nodes[0])
        return all(self.find(node) == root for node in nodes)

    def is_connected(self, node1: Hashable, node2: Hashable) -> bool:
        """
        Check whether two nodes are in the same connected component.

        Parameters
        ----------
        node1 : Hashable
            First node.
        node2 : Hashable
            Second node.

        Returns
        -------
        bool
            True if node1 and node2 are connected, False otherwise.
        """

        return self.find(node1) == self.find(node2)

    test = is_connected

    def __contains__(self, node: Hashable) -> bool:
        return node in self.parent

    def __iter__(self):
        """
        Iterate over the current connected components.

        Returns
        -------
        Iterator[Set[Hashable]]
            An iterator over sets of nodes.
        """

        return iter(self.components.values())

    def __getitem__(self, index: int) -> Set[Hashable]:
        """Index into the list of connected components."""

        return list(self.components.values())[index]

    def __len__(self) -> int:
        """
        Return the number of connected components.

        Returns
        -------
        int
            The number of components currently being tracked.
        """

        return len(self.components)
