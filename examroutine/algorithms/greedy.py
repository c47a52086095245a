from typing import Callable, Dict, Hashable, List
import networkx as nx

TIE_BREAKS = ('input', 'code')


def tie_break_key(G: nx.Graph, tie_break: str = 'input') -> Callable[[Hashable], tuple]:
    """Secondary sort key for courses of equal priority.

    'input' keeps first-seen order; 'code' uses course_code lexical order and
    falls back to first-seen order for duplicate codes.
    """
    if tie_break == 'input':
        return lambda u: (G.nodes[u]['order'],)
    if tie_break == 'code':
        return lambda u: (str(G.nodes[u]['code']), G.nodes[u]['order'])
    raise ValueError("tie_break must be 'input' or 'code'")


def degree_order(G: nx.Graph, tie_break: str = 'input') -> List[Hashable]:
    key = tie_break_key(G, tie_break)
    return sorted(G.nodes(), key=lambda u: (-G.degree(u),) + key(u))


def first_free_color(neighbor_colors) -> int:
    c = 0
    while c in neighbor_colors:
        c += 1
    return c


def greedy_color(G: nx.Graph, order: List[Hashable]) -> Dict[Hashable, int]:
    """First-fit colouring of the nodes in the given order."""
    coloring: Dict[Hashable, int] = {}
    for u in order:
        neighbor_colors = {coloring[v] for v in G.adj[u] if v in coloring}
        coloring[u] = first_free_color(neighbor_colors)
    return coloring


def welsh_powell(G: nx.Graph, tie_break: str = 'input') -> Dict[Hashable, int]:
    return greedy_color(G, degree_order(G, tie_break))


def compact_colors(coloring: Dict[Hashable, int]) -> Dict[Hashable, int]:
    """Relabel colours to 0..k-1 in order of first appearance.

    Relies on dict insertion order, i.e. the order nodes were coloured.
    """
    relabel: Dict[int, int] = {}
    for c in coloring.values():
        if c not in relabel:
            relabel[c] = len(relabel)
    return {n: relabel[c] for n, c in coloring.items()}
