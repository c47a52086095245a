import networkx as nx
from ..models import Schedule
from .validation import conflicts_ok, coverage_ok


def _greedy_clique_lb(G: nx.Graph) -> int:
    """Fast lower bound on the number of exam days via a greedy maximal clique.

    Picks the highest-degree course, then greedily grows a clique by repeatedly
    adding a course adjacent to all current clique members. Every course in a
    clique needs its own day, so the clique size bounds the day count.
    """
    if G.number_of_nodes() == 0:
        return 0
    seed = max(G.nodes(), key=lambda u: G.degree(u))
    clique = {seed}
    candidates = set(G.neighbors(seed))
    while candidates:
        u = max(candidates, key=lambda v: (G.degree(v), -G.nodes[v].get('order', 0)))
        new_cands = {v for v in candidates if all(G.has_edge(v, w) for w in clique)}
        if u in new_cands:
            clique.add(u)
            candidates = new_cands.intersection(G.neighbors(u))
        else:
            candidates.remove(u)
    return len(clique)

def summary(G: nx.Graph, sched: Schedule) -> str:
    n = G.number_of_nodes()
    m = G.number_of_edges()
    lb = _greedy_clique_lb(G)
    day_sizes = ", ".join(f"{len(courses)}" for courses in sched.exam_days.values())
    return (
        f"Courses: {n}  Conflict edges: {m}\n"
        f"Exam days used: {sched.num_days}  Courses per day: [{day_sizes}]\n"
        f"Clique lower bound: {lb}\n"
        f"Valid (conflicts): {conflicts_ok(G, sched)}  Valid (coverage): {coverage_ok(G, sched)}\n"
    )
