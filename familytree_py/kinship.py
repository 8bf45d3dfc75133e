"""Relationship aggregation: the answer to "how is person2 related to person1?".

API:
    find_relationship(id1, id2, people, max_depth=None) -> Optional[Relationship]
    find_all_relationships(id1, id2, people, max_depth=None) -> List[Relationship]
    match_relationship(rel, on_blood, on_path, on_none)

A ``Relationship`` is one of three frozen dataclasses, told apart by ``kind``:

    BloodRelationship  kind="blood"  description, path1, path2, lca
    PathRelationship   kind="path"   description, path
    NoRelationship     kind="none"   description

Descriptions always state person2's relation to person1 ("Father" means
person2 is person1's father).
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union
import logging

from .cousins import describe_blood_relationship, in_law_term, spouse_term
from .graph import People, PersonIndex, index_people
from .lca import find_lowest_common_ancestor
from .models import Person
from .relationship import describe_path, find_generic_path
from .traversal import all_blood_relative_ids

NO_PATH_MESSAGE = "No relationship path could be found."

T = TypeVar("T")


def _ids(persons: List[Person]) -> List[str]:
    return [p.id for p in persons]


@dataclass(frozen=True)
class BloodRelationship:
    description: str
    path1: List[Person]
    path2: List[Person]
    lca: Person
    kind: str = field(default="blood", init=False)

    @property
    def path_length(self) -> int:
        return len(self.path1) + len(self.path2) - 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "description": self.description,
            "path1": _ids(self.path1),
            "path2": _ids(self.path2),
            "lca": self.lca.id,
        }


@dataclass(frozen=True)
class PathRelationship:
    description: str
    path: List[Person]
    kind: str = field(default="path", init=False)

    @property
    def path_length(self) -> int:
        return len(self.path) - 1

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "description": self.description, "path": _ids(self.path)}


@dataclass(frozen=True)
class NoRelationship:
    description: str = NO_PATH_MESSAGE
    kind: str = field(default="none", init=False)

    @property
    def path_length(self) -> float:
        return float("inf")

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "description": self.description}


Relationship = Union[BloodRelationship, PathRelationship, NoRelationship]


def match_relationship(
    rel: Relationship,
    on_blood: Callable[[BloodRelationship], T],
    on_path: Callable[[PathRelationship], T],
    on_none: Callable[[NoRelationship], T],
) -> T:
    """Dispatch on the relationship variant; every case must be handled."""
    if isinstance(rel, BloodRelationship):
        return on_blood(rel)
    if isinstance(rel, PathRelationship):
        return on_path(rel)
    if isinstance(rel, NoRelationship):
        return on_none(rel)
    raise TypeError(f"not a relationship: {rel!r}")


def _in_law(index: PersonIndex, person1: Person, person2: Person) -> Optional[PathRelationship]:
    """person2 married to a descendant of person1 (son's wife, daughter's husband...)."""
    for spouse_id in person2.spouse_ids():
        spouse = index.get(spouse_id)
        if spouse is None or spouse.id == person1.id:
            continue
        res = find_lowest_common_ancestor(person1.id, spouse.id, index)
        if res is None or res.lca.id != person1.id:
            continue
        desc = in_law_term(person2, len(res.path2) - 1)
        if desc:
            return PathRelationship(desc, [person1, spouse, person2])
    return None


def find_relationship(id1: str, id2: str, people: People, max_depth: Optional[int] = None) -> Optional[Relationship]:
    """Return the primary relationship of id2 to id1.

    Returns None for a self query or when either id is unknown; callers
    special-case "Self" themselves.
    """
    index = index_people(people)
    if not id1 or not id2 or id1 == id2:
        return None
    person1 = index.get(id1)
    person2 = index.get(id2)
    if person1 is None or person2 is None:
        return None

    if person1.is_married_to(id2):
        return PathRelationship(spouse_term(person2.gender), [person1, person2])

    lca_result = find_lowest_common_ancestor(id1, id2, index)
    if lca_result is not None:
        lca, path1, path2 = lca_result
        description = describe_blood_relationship(person1, person2, lca, path1, path2)
        return BloodRelationship(description, path1, path2, lca)

    in_law = _in_law(index, person1, person2)
    if in_law is not None:
        return in_law

    path = find_generic_path(id1, id2, index, max_depth=max_depth)
    if path:
        return PathRelationship(describe_path(path), path)

    logging.debug("no relationship between %s and %s", id1, id2)
    return NoRelationship()


def _via_relative(rel: Relationship, person2: Person) -> Optional[PathRelationship]:
    """'<relative's relation>'s Husband/Wife' for person2 married to that relative."""
    suffix = spouse_term(person2.gender)

    def on_blood(r: BloodRelationship) -> Optional[PathRelationship]:
        path = r.path1[:-1] + list(reversed(r.path2)) + [person2]
        return PathRelationship(f"{r.description}'s {suffix}", path)

    def on_path(r: PathRelationship) -> Optional[PathRelationship]:
        return PathRelationship(f"{r.description}'s {suffix}", list(r.path) + [person2])

    return match_relationship(rel, on_blood, on_path, lambda r: None)


def find_all_relationships(id1: str, id2: str, people: People, max_depth: Optional[int] = None) -> List[Relationship]:
    """Return every way id2 relates to id1, shortest path first.

    Besides the primary relationship, every blood relative of id1 married to
    id2 contributes an in-law description. Duplicate descriptions are dropped.
    A single NoRelationship is returned when nothing connects them; an empty
    list for a self query or unknown ids.
    """
    index = index_people(people)
    person1 = index.get(id1)
    person2 = index.get(id2)
    if person1 is None or person2 is None or id1 == id2:
        return []

    relationships: List[Relationship] = []
    seen = set()

    def add(rel: Optional[Relationship]) -> None:
        if rel is None or isinstance(rel, NoRelationship) or rel.description in seen:
            return
        seen.add(rel.description)
        relationships.append(rel)

    add(find_relationship(id1, id2, index, max_depth=max_depth))

    for relative_id in sorted(all_blood_relative_ids(id1, index)):
        relative = index.get(relative_id)
        if relative is None or relative.id == id1 or not relative.is_married_to(id2):
            continue
        rel_to_relative = find_relationship(id1, relative.id, index, max_depth=max_depth)
        if rel_to_relative is None:
            continue
        add(_via_relative(rel_to_relative, person2))

    if not relationships:
        return [NoRelationship()]

    relationships.sort(key=lambda r: r.path_length)
    return relationships
