"""In-memory family tree that keeps the graph invariants the engine relies on.

The relationship engine only reads person collections. ``FamilyTree`` is the
editing side: every mutation keeps ``parent_ids`` / ``children_ids`` mirrored
and marriage records reciprocal (same status, date and place on both sides).

The class keeps ``self.persons`` as a plain id -> Person dict, so a tree can be
handed to any engine function directly (``find_relationship(a, b, tree.persons)``).
Nothing is persisted.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional
import logging

from .models import Marriage, MarriageStatus, Person, _new_id


class FamilyTree:
    def __init__(self, name: str = "", people: Optional[Iterable[Person]] = None, id: Optional[str] = None) -> None:
        self.id = id or _new_id()
        self.name = name
        self.persons: Dict[str, Person] = {}
        for p in people or []:
            self.persons[p.id] = p

    # Person operations
    def get_person(self, pid: str) -> Optional[Person]:
        return self.persons.get(pid)

    def list_persons(self) -> List[Person]:
        return list(self.persons.values())

    def _require(self, pid: str) -> Person:
        p = self.persons.get(pid)
        if p is None:
            raise KeyError(pid)
        return p

    def add_person(self, person: Person) -> Person:
        """Add ``person``; its parents (if known) get it as a child.

        When two parents are given they are married to each other unless they
        already are.
        """
        person.children_ids = []
        person.marriages = []
        person.parent_ids = list(dict.fromkeys(pid for pid in person.parent_ids if pid))
        self.persons[person.id] = person
        parents = [pid for pid in person.parent_ids if pid in self.persons]
        if len(parents) == 2:
            self._link_spouses(parents[0], parents[1], Marriage(spouse_id=parents[1]))
        for pid in parents:
            self._add_child(pid, person.id)
        logging.debug("added person %s to tree %s (%d persons)", person.id, self.id, len(self.persons))
        return person

    def update_parents(self, pid: str, parent_ids: List[str]) -> None:
        person = self._require(pid)
        parent_ids = list(dict.fromkeys(p for p in parent_ids if p))
        if parent_ids == person.parent_ids:
            return
        for old in person.parent_ids:
            self._remove_child(old, pid)
        known = [p for p in parent_ids if p in self.persons]
        if len(known) == 2:
            self._link_spouses(known[0], known[1], Marriage(spouse_id=known[1]))
        for new in known:
            self._add_child(new, pid)
        person.parent_ids = parent_ids

    def add_marriage(self, pid: str, spouse_id: str, status: MarriageStatus = MarriageStatus.MARRIED, date: Optional[str] = None, place: Optional[str] = None) -> None:
        self._require(pid)
        self._require(spouse_id)
        if pid == spouse_id:
            raise ValueError("a person cannot marry themselves")
        self._link_spouses(pid, spouse_id, Marriage(spouse_id=spouse_id, status=status, date=date, place=place), replace=True)

    def set_marriages(self, pid: str, marriages: List[Marriage]) -> None:
        """Replace the marriages of ``pid`` and mirror the change on every spouse."""
        person = self._require(pid)
        new_ids = {m.spouse_id for m in marriages}
        for old in person.spouse_ids():
            if old not in new_ids and old in self.persons:
                spouse = self.persons[old]
                spouse.marriages = [m for m in spouse.marriages if m.spouse_id != pid]
        kept = []
        for m in marriages:
            spouse = self.persons.get(m.spouse_id)
            if spouse is None or spouse.id == pid:
                continue
            self._put_marriage(spouse, m.reciprocal(pid))
            kept.append(m)
        person.marriages = kept

    def delete_person(self, pid: str) -> bool:
        person = self.persons.pop(pid, None)
        if person is None:
            return False
        for parent_id in person.parent_ids + person.biological_parent_ids:
            self._remove_child(parent_id, pid)
        for child_id in person.children_ids:
            child = self.persons.get(child_id)
            if child is not None:
                child.parent_ids = [p for p in child.parent_ids if p != pid]
                child.biological_parent_ids = [p for p in child.biological_parent_ids if p != pid]
        for spouse_id in person.spouse_ids():
            spouse = self.persons.get(spouse_id)
            if spouse is not None:
                spouse.marriages = [m for m in spouse.marriages if m.spouse_id != pid]
        return True

    # --- edge helpers ---
    def _add_child(self, parent_id: str, child_id: str) -> None:
        parent = self.persons.get(parent_id)
        if parent is not None and child_id not in parent.children_ids:
            parent.children_ids.append(child_id)

    def _remove_child(self, parent_id: str, child_id: str) -> None:
        parent = self.persons.get(parent_id)
        if parent is not None:
            parent.children_ids = [c for c in parent.children_ids if c != child_id]

    @staticmethod
    def _put_marriage(person: Person, marriage: Marriage) -> None:
        for i, m in enumerate(person.marriages):
            if m.spouse_id == marriage.spouse_id:
                person.marriages[i] = marriage
                return
        person.marriages.append(marriage)

    def _link_spouses(self, a_id: str, b_id: str, marriage: Marriage, replace: bool = False) -> None:
        a = self.persons[a_id]
        b = self.persons[b_id]
        if not replace and a.is_married_to(b_id) and b.is_married_to(a_id):
            return
        self._put_marriage(a, marriage)
        self._put_marriage(b, marriage.reciprocal(a_id))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "people": [p.to_dict() for p in self.persons.values()]}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "FamilyTree":
        return FamilyTree(name=d.get("name", ""), people=[Person.from_dict(p) for p in d.get("people", [])], id=d.get("id"))
