"""Person index and edge accessors shared by every traversal.

The engine receives the caller's person collection on every call (a list of
``Person`` or an id -> Person mapping). ``index_people`` turns it into a dict
once so the traversals do O(1) lookups instead of scanning the collection for
every visited id.

Accessors return raw ids; traversals skip ids missing from the index, so a
dangling reference is a graph boundary, not an error.
"""
from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Mapping, Union

from .models import Person

PersonIndex = Dict[str, Person]
People = Union[Mapping[str, Person], Iterable[Person]]
ParentAccessor = Callable[[Person], List[str]]


def index_people(people: People) -> PersonIndex:
    """Return an id -> Person dict for ``people``.

    A dict is used as is (the engine never mutates it). Raises TypeError when
    ``people`` is None.
    """
    if people is None:
        raise TypeError("people collection is required")
    if isinstance(people, dict):
        return people
    if isinstance(people, Mapping):
        return dict(people)
    return {p.id: p for p in people}


def adoptive_line_ids(person: Person) -> List[str]:
    """Legal line: the ``parent_ids`` of everybody."""
    return list(person.parent_ids or [])


def biological_line_ids(person: Person) -> List[str]:
    """Biological line: birth parents of adopted people, ``parent_ids`` otherwise."""
    if person.is_adopted:
        return list(person.biological_parent_ids or [])
    return list(person.parent_ids or [])


def neighbor_ids(person: Person) -> List[str]:
    """Ids adjacent to ``person``: parents, then children, then spouses."""
    ids = list(person.parent_ids or [])
    ids.extend(person.children_ids or [])
    ids.extend(person.spouse_ids())
    return [i for i in ids if i and i != person.id]
