"""Read-only views of a tree for renderers.

Nothing here modifies the tree. A renderer lays nodes out row by row from
``levels`` and column by column from ``positions``; ``to_graph`` hands the
same information over as a networkx graph.
"""
from typing import Any, Dict, List

import networkx as nx

from .node import Node


def levels(tree) -> List[List[Node]]:
    """Groups nodes by depth, root first, each level in ascending key order"""
    if tree.root is None:
        return []

    result = [[tree.root]]
    while True:
        children = [child for node in result[-1] for child in (node.left, node.right) if child is not None]
        if not children:
            return result
        result.append(children)


def positions(tree) -> Dict[Any, int]:
    """Maps every key to its index in ascending key order"""
    mapping = {}
    node = tree.min()
    while node is not None:
        mapping[node.key] = len(mapping)
        node = tree.successor(node)
    return mapping


def to_graph(tree) -> nx.DiGraph:
    G = nx.DiGraph()
    columns = positions(tree)

    for depth, level in enumerate(levels(tree)):
        for node in level:
            G.add_node(
                node.key,
                colour=node.colour,
                value=node.value,
                depth=depth,
                position=columns[node.key],
            )
            if node.parent is not None:
                G.add_edge(node.parent.key, node.key, direction=node.get_direction())

    G.graph["root"] = tree.root.key if tree.root is not None else None
    return G
