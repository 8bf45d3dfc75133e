"""Breadth-first ancestor / descendant walks and sibling lookup.

API:
    walk_ancestors(person_id, people, parents=adoptive_line_ids) -> List[AncestorEntry]
    walk_lines(start_ids, people, parents=adoptive_line_ids, tag=None) -> List[LineEntry]
    walk_descendants(person_id, people) -> List[DescendantEntry]
    siblings(person_id, people) -> List[Person]
    all_blood_relative_ids(person_id, people) -> Set[str]

Every walk keeps one visited set per call so corrupted data (a person listed as
their own ancestor) still terminates. When a person is reachable through two
lines (pedigree collapse) only the first discovered level is reported.
"""
from __future__ import annotations
from collections import deque
from typing import Any, Callable, Iterable, List, NamedTuple, Optional, Set, Tuple

from .graph import People, ParentAccessor, PersonIndex, adoptive_line_ids, index_people
from .models import Person


class AncestorEntry(NamedTuple):
    person: Person
    level: int


class LineEntry(NamedTuple):
    person: Person
    level: int
    tag: Any


class DescendantEntry(NamedTuple):
    person: Person
    generation: int


def _walk(index: PersonIndex, seeds: Iterable[Tuple[str, Any]], next_ids, visited: Set[str]) -> List[Tuple[Person, int, Any]]:
    # each seed's tag is inherited by everybody reached through it
    results = []
    q = deque((pid, 1, tag) for pid, tag in seeds)
    while q:
        pid, depth, tag = q.popleft()
        if not pid or pid in visited:
            continue
        visited.add(pid)
        p = index.get(pid)
        if p is None:
            continue
        results.append((p, depth, tag))
        for nxt in next_ids(p):
            if nxt not in visited:
                q.append((nxt, depth + 1, tag))
    return results


def _children_ids(person: Person) -> List[str]:
    return list(person.children_ids or [])


def walk_ancestors(person_id: str, people: People, parents: ParentAccessor = adoptive_line_ids) -> List[AncestorEntry]:
    """Return every ancestor of ``person_id`` with its level (parents are level 1).

    ``parents`` selects which parent edge to follow, so the adoptive and the
    biological line of an adopted person can be walked independently.
    """
    index = index_people(people)
    start = index.get(person_id)
    if start is None:
        return []
    seeds = [(pid, None) for pid in parents(start)]
    return [AncestorEntry(p, lvl) for p, lvl, _ in _walk(index, seeds, parents, {start.id})]


def walk_lines(
    start_ids: Iterable[str],
    people: People,
    parents: ParentAccessor = adoptive_line_ids,
    tag: Optional[Callable[[Person], Any]] = None,
) -> List[LineEntry]:
    """Walk upward from ``start_ids`` (level 1) following ``parents``.

    Each entry carries ``tag(first person of its line)``, so an ancestor keeps
    the side of the family it was reached through. Start ids missing from the
    collection are skipped.
    """
    index = index_people(people)
    seeds = [(pid, tag(index[pid]) if tag else None) for pid in start_ids if pid in index]
    return [LineEntry(p, lvl, t) for p, lvl, t in _walk(index, seeds, parents, set())]


def walk_descendants(person_id: str, people: People) -> List[DescendantEntry]:
    """Return every descendant of ``person_id`` with its generation (children are 1)."""
    index = index_people(people)
    start = index.get(person_id)
    if start is None:
        return []
    seeds = [(cid, None) for cid in _children_ids(start)]
    return [DescendantEntry(p, gen) for p, gen, _ in _walk(index, seeds, _children_ids, {start.id})]


def siblings(person_id: str, people: People) -> List[Person]:
    """People sharing at least one parent with ``person_id`` (half siblings included)."""
    index = index_people(people)
    person = index.get(person_id)
    if person is None:
        return []
    parent_set = {pid for pid in (person.parent_ids or []) if pid}
    if not parent_set:
        return []
    return [
        p
        for p in index.values()
        if p.id != person.id and any(pid in parent_set for pid in (p.parent_ids or []))
    ]


def all_blood_relative_ids(person_id: str, people: People) -> Set[str]:
    """Ids of the person, their ancestors and every descendant of those."""
    index = index_people(people)
    person = index.get(person_id)
    if person is None:
        return set()
    progenitors = [person] + [e.person for e in walk_ancestors(person_id, index)]
    relatives: Set[str] = set()
    for prog in progenitors:
        relatives.add(prog.id)
        for entry in walk_descendants(prog.id, index):
            relatives.add(entry.person.id)
    return relatives
