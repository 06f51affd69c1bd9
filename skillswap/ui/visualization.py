"""
Visualization for the SkillSwap matching system.
"""

from __future__ import annotations

from typing import Dict, List, Tuple, TYPE_CHECKING

import networkx as nx
import matplotlib.pyplot as plt

from ..matching.complementarity import match_directions

if TYPE_CHECKING:
    from ..models.state import AppState


def build_match_graph(state: "AppState") -> nx.Graph:
    """
    Undirected graph of complementary relationships:
    - one node per user with skills (label = display name)
    - one edge per user pair sharing a complementary skill, with
      attributes `skills` (sorted skill names) and `mutual` (each side can
      teach the other at least one skill)
    """
    G = nx.Graph()
    for s in state.skills:
        if s.user_id not in G:
            profile = state.profiles.get(s.user_id)
            G.add_node(s.user_id, label=(profile.display_name if profile and profile.display_name else s.user_id))

    # (u, v) with u < v -> [u teaches v, v teaches u, skills]
    links: Dict[Tuple[str, str], List] = {}
    for a in state.skills:
        for b in state.skills:
            if a.user_id >= b.user_id:
                continue
            a_teaches, b_teaches = match_directions(a, b)
            if not (a_teaches or b_teaches):
                continue
            rec = links.setdefault((a.user_id, b.user_id), [False, False, set()])
            rec[0] = rec[0] or a_teaches
            rec[1] = rec[1] or b_teaches
            rec[2].add(a.skill_name.strip())

    for (u, v), (u_teaches, v_teaches, skills) in links.items():
        G.add_edge(u, v, mutual=bool(u_teaches and v_teaches), skills=sorted(skills, key=str.casefold))
    return G


def show_match_graph(state: "AppState") -> None:
    """Draw the match graph: mutual swaps in red, one-way matches in gray."""
    G = build_match_graph(state)
    if G.number_of_nodes() == 0:
        print("\n(No users with skills to display.)")
        return
    if G.number_of_edges() == 0:
        print("\nNo complementary matches to display.")
        return

    edges = list(G.edges(data=True))
    edge_colors = ["red" if d["mutual"] else "gray" for _, _, d in edges]
    edge_widths = [1.0 + 0.8 * len(d["skills"]) for _, _, d in edges]
    edge_labels = {(u, v): ", ".join(d["skills"]) for u, v, d in edges}
    labels = {n: d.get("label", n) for n, d in G.nodes(data=True)}

    pos = nx.spring_layout(G, seed=7)

    plt.figure(figsize=(9, 6))
    nx.draw_networkx_nodes(G, pos, node_color="lightblue", node_size=900)
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=8)
    nx.draw_networkx_edges(G, pos, edgelist=[(u, v) for u, v, _ in edges], edge_color=edge_colors, width=edge_widths)
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7)
    plt.title("Skill matches: mutual swaps (red) and one-way matches (gray)")
    plt.axis("off")
    plt.tight_layout()
    plt.show()
