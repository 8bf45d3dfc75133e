"""Kinship reports: every ancestor, descendant or sibling with its term.

API:
    ancestors_with_relationship(person_id, people) -> List[dict]
    descendants_with_relationship(person_id, people) -> List[dict]
    siblings_with_relationship(person_id, people) -> List[dict]

Each dict contains at least the keys:
    - person: Person
    - relationship: str
and descendants also carry ``generation``.

Ancestor terms beyond the parents carry the side of the family they come
through, taken from the first parent of the line: "Grandmother (Maternal)".
An adopted person's adoptive and biological lines are walked separately and
suffixed " - Adoptive" / " - Biological"; an ancestor found on both lines gets
both terms joined by " & ".
"""
from __future__ import annotations
from typing import Dict, List, Optional

from .cousins import ADOPTIVE, BIOLOGICAL, ancestor_term, descendant_term, lineage_qualifier, sibling_term
from .graph import People, ParentAccessor, PersonIndex, adoptive_line_ids, biological_line_ids, index_people
from .traversal import siblings, walk_descendants, walk_lines


def _ancestors_for_lineage(
    index: PersonIndex,
    start_ids: List[str],
    parents: ParentAccessor,
    lineage_type: Optional[str],
    results: Dict[str, Dict],
) -> None:
    # one walk per lineage so an ancestor shared by both lines is reported twice
    for entry in walk_lines(start_ids, index, parents, tag=lineage_qualifier):
        term = ancestor_term(entry.person.gender, entry.level)
        if entry.level > 1 and entry.tag:
            term += f" ({entry.tag})"
        if lineage_type:
            term += f" - {lineage_type}"

        found = results.setdefault(entry.person.id, {"person": entry.person, "relationships": []})
        if term not in found["relationships"]:
            found["relationships"].append(term)


def ancestors_with_relationship(person_id: str, people: People) -> List[Dict]:
    index = index_people(people)
    person = index.get(person_id)
    if person is None:
        return []

    results: Dict[str, Dict] = {}
    if person.is_adopted:
        if person.parent_ids:
            _ancestors_for_lineage(index, person.parent_ids, adoptive_line_ids, ADOPTIVE, results)
        if person.biological_parent_ids:
            _ancestors_for_lineage(index, person.biological_parent_ids, biological_line_ids, BIOLOGICAL, results)
    elif person.parent_ids:
        # a non-adopted person's parents are their biological parents
        _ancestors_for_lineage(index, person.parent_ids, biological_line_ids, None, results)

    return [{"person": e["person"], "relationship": " & ".join(e["relationships"])} for e in results.values()]


def descendants_with_relationship(person_id: str, people: People) -> List[Dict]:
    return [
        {"person": e.person, "relationship": descendant_term(e.person.gender, e.generation), "generation": e.generation}
        for e in walk_descendants(person_id, people)
    ]


def siblings_with_relationship(person_id: str, people: People) -> List[Dict]:
    return [{"person": s, "relationship": sibling_term(s.gender)} for s in siblings(person_id, people)]
