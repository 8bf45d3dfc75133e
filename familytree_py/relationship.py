"""Relationship graph traversal utilities.

Finds connection paths between two persons in the family graph. Edges
considered: parent <-> child and spouse <-> spouse. All edges have weight 1.

API:
    find_generic_path(id1, id2, people, max_depth=None) -> List[Person]
    describe_path(path) -> str
    all_shortest_paths(people, a_id, b_id, max_paths=100, max_depth=None) -> List[List[str]]

``find_generic_path`` is a plain BFS from the first person: neighbours are
expanded parents first, then children, then spouses, so among equally short
paths the first one enqueued wins. Paths are lists from source to target
(inclusive); an empty list means no path was found.
"""
from __future__ import annotations
from collections import deque, defaultdict
from typing import Dict, List, Optional, Sequence, Set
import logging

from .graph import People, PersonIndex, index_people, neighbor_ids
from .models import Gender, Person


def _neighbors(index: PersonIndex, pid: str) -> List[str]:
    """Return neighbouring ids present in the index (parents, children, spouses)."""
    person = index.get(pid)
    if person is None:
        return []
    seen: Set[str] = set()
    out = []
    for nb in neighbor_ids(person):
        if nb in index and nb not in seen:
            seen.add(nb)
            out.append(nb)
    return out


def find_generic_path(id1: str, id2: str, people: People, max_depth: Optional[int] = None) -> List[Person]:
    """Return the first shortest path of persons from id1 to id2, or []."""
    index = index_people(people)
    if id1 not in index or id2 not in index:
        return []
    if id1 == id2:
        return [index[id1]]

    prev: Dict[str, Optional[str]] = {id1: None}
    depth: Dict[str, int] = {id1: 0}
    q = deque([id1])
    while q:
        cur = q.popleft()
        if cur == id2:
            break
        if max_depth is not None and depth[cur] >= max_depth:
            continue
        for nb in _neighbors(index, cur):
            if nb in prev:
                continue
            prev[nb] = cur
            depth[nb] = depth[cur] + 1
            q.append(nb)

    if id2 not in prev:
        logging.debug("no path between %s and %s (explored %d persons)", id1, id2, len(prev))
        return []

    path: List[Person] = []
    node: Optional[str] = id2
    while node is not None:
        path.append(index[node])
        node = prev[node]
    path.reverse()
    return path


def describe_path_segment(p1: Person, p2: Person) -> str:
    """Verb phrase for the edge p1 -> p2, gendered by p1."""
    g = p1.gender
    if p2.id in (p1.children_ids or []):
        return "is the father of" if g == Gender.MALE else "is the mother of" if g == Gender.FEMALE else "is the parent of"
    if p2.id in (p1.parent_ids or []):
        return "is the son of" if g == Gender.MALE else "is the daughter of" if g == Gender.FEMALE else "is the child of"
    if p1.is_married_to(p2.id):
        return "is the husband of" if g == Gender.MALE else "is the wife of" if g == Gender.FEMALE else "is the spouse of"
    return "is related to"


def describe_path(path: Sequence[Person]) -> str:
    """Render a path as prose: 'A is the father of B, who is the husband of C.'"""
    if len(path) < 2:
        return "They are the same person."
    description = path[0].full_name
    for i in range(len(path) - 1):
        relation = describe_path_segment(path[i], path[i + 1])
        description += (", who " if i > 0 else " ") + f"{relation} {path[i + 1].full_name}"
    return description + "."


def all_shortest_paths(people: People, a_id: str, b_id: str, max_paths: int = 100, max_depth: Optional[int] = None) -> List[List[str]]:
    """Return all shortest paths (up to max_paths) between a_id and b_id.

    We perform a BFS that records predecessors for nodes at the shortest
    distance. Once the target is reached at level L we stop exploring deeper
    levels and backtrack to enumerate all shortest paths.
    """
    index = index_people(people)
    if a_id is None or b_id is None:
        return []
    if a_id not in index or b_id not in index:
        return []
    if a_id == b_id:
        return [[a_id]]

    levels: Dict[str, int] = {a_id: 0}
    preds: Dict[str, List[str]] = defaultdict(list)

    q = deque([a_id])
    found_level: Optional[int] = None

    while q:
        cur = q.popleft()
        cur_level = levels[cur]
        if found_level is not None and cur_level >= found_level:
            continue
        if max_depth is not None and cur_level >= max_depth:
            continue
        for nb in _neighbors(index, cur):
            if nb not in levels:
                levels[nb] = cur_level + 1
                preds[nb].append(cur)
                if nb == b_id:
                    found_level = cur_level + 1
                else:
                    q.append(nb)
            elif levels[nb] == cur_level + 1 and cur not in preds[nb]:
                # another predecessor on the same shortest level
                preds[nb].append(cur)
    if b_id not in preds:
        return []

    paths: List[List[str]] = []

    def backtrack(node: str, acc: List[str]):
        if len(paths) >= max_paths:
            return
        if node == a_id:
            paths.append(list(reversed(acc + [a_id])))
            return
        for p in preds.get(node, []):
            backtrack(p, acc + [node])

    backtrack(b_id, [])
    return paths
