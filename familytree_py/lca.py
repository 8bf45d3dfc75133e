"""Lowest common ancestor (LCA) search with path reconstruction.

API:
    find_lowest_common_ancestor(id1, id2, people) -> Optional[LcaResult]
    path_to_ancestor(index, start_id, ancestor_id) -> Optional[List[Person]]

The ancestor closure of person1 (person1 included) is computed first, then an
upward BFS from person2 (person2 included) stops at the first id that belongs
to that closure. With pedigree collapse several candidates can sit at the same
distance; the one person2's BFS discovers first wins.

path1 runs from person1 to the LCA and path2 from person2 to the LCA, both
inclusive, so ``len(path) - 1`` is the generation distance.
"""
from __future__ import annotations
from collections import deque
from typing import Dict, List, NamedTuple, Optional, Set
import logging

from .graph import People, PersonIndex, index_people
from .models import Person


class LcaResult(NamedTuple):
    lca: Person
    path1: List[Person]
    path2: List[Person]


def ancestor_closure(index: PersonIndex, person_id: str) -> Dict[str, Person]:
    """Return id -> Person for ``person_id`` and all of its ancestors."""
    closure: Dict[str, Person] = {}
    q = deque([person_id])
    while q:
        cur = q.popleft()
        if not cur or cur in closure:
            continue
        person = index.get(cur)
        if person is None:
            continue
        closure[cur] = person
        q.extend(pid for pid in (person.parent_ids or []) if pid not in closure)
    return closure


def path_to_ancestor(index: PersonIndex, start_id: str, ancestor_id: str) -> Optional[List[Person]]:
    """Shortest upward path from ``start_id`` to ``ancestor_id``, both inclusive."""
    start = index.get(start_id)
    if start is None:
        return None
    if start_id == ancestor_id:
        return [start]

    q = deque([(start_id, [start])])
    visited: Set[str] = {start_id}
    while q:
        cur, path = q.popleft()
        person = index.get(cur)
        for pid in (person.parent_ids or []) if person else []:
            if not pid or pid in visited:
                continue
            visited.add(pid)
            parent = index.get(pid)
            if parent is None:
                continue
            new_path = path + [parent]
            if pid == ancestor_id:
                return new_path
            q.append((pid, new_path))
    return None


def find_lowest_common_ancestor(id1: str, id2: str, people: People) -> Optional[LcaResult]:
    """Return the nearest common ancestor of id1 and id2 and the paths to it.

    Returns None for unknown ids or disjoint lineages.
    """
    index = index_people(people)
    if id1 not in index or id2 not in index:
        return None

    p1_ancestors = ancestor_closure(index, id1)

    q = deque([id2])
    visited: Set[str] = {id2}
    while q:
        cur = q.popleft()
        if cur in p1_ancestors:
            path1 = path_to_ancestor(index, id1, cur)
            path2 = path_to_ancestor(index, id2, cur)
            if path1 and path2:
                logging.debug("lca of %s and %s is %s (d1=%d, d2=%d)", id1, id2, cur, len(path1) - 1, len(path2) - 1)
                return LcaResult(p1_ancestors[cur], path1, path2)
        person = index.get(cur)
        if person is None:
            continue
        for pid in person.parent_ids or []:
            if pid and pid not in visited:
                visited.add(pid)
                q.append(pid)
    return None
