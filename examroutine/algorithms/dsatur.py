from typing import Dict, Hashable, Set
import networkx as nx

from .greedy import first_free_color, tie_break_key

def dsatur(G: nx.Graph, tie_break: str = 'input') -> Dict[Hashable, int]:
    """DSATUR colouring with a deterministic tie-break.

    Picks the uncoloured course with the most distinct neighbour colours, then
    the highest degree, then the tie-break key. The returned dict is ordered
    by colouring step.
    """
    key = tie_break_key(G, tie_break)
    coloring: Dict[Hashable, int] = {}
    saturation: Dict[Hashable, Set[int]] = {u: set() for u in G.nodes()}
    degrees = {u: G.degree(u) for u in G.nodes()}

    while len(coloring) < G.number_of_nodes():
        candidates = [u for u in G.nodes() if u not in coloring]
        u = min(candidates, key=lambda x: (-len(saturation[x]), -degrees[x]) + key(x))
        neighbor_colors = {coloring[v] for v in G.adj[u] if v in coloring}
        c = first_free_color(neighbor_colors)
        coloring[u] = c
        for v in G.adj[u]:
            if v not in coloring:
                saturation[v].add(c)
    return coloring
