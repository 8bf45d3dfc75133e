from familytree_py.models import Person, Gender
from familytree_py.reports import ancestors_with_relationship, descendants_with_relationship, siblings_with_relationship


def _by_name(rows):
    return {r["person"].first_name: r["relationship"] for r in rows}


def test_ancestors_carry_paternal_and_maternal_side(family):
    tree, P = family
    rows = _by_name(ancestors_with_relationship(P["Sam"].id, tree.persons))
    assert rows == {
        "Mark": "Father",
        "Wendy": "Mother",
        "David": "Grandfather (Paternal)",
        "Mary": "Grandmother (Paternal)",
        "George": "Great-Grandfather (Paternal)",
        "Grace": "Great-Grandmother (Paternal)",
    }


def test_maternal_line(family):
    tree, P = family
    rows = _by_name(ancestors_with_relationship(P["Kevin"].id, tree.persons))
    assert rows["Alice"] == "Grandmother (Maternal)"
    assert rows["George"] == "Great-Grandfather (Maternal)"
    assert rows["Henry"] == "Father"


def _adoption():
    pp = Person(first_name="PP", gender=Gender.MALE)
    rm = Person(first_name="RM", gender=Gender.FEMALE)
    p = Person(first_name="P", gender=Gender.MALE, parent_ids=[pp.id])
    q = Person(first_name="Q", gender=Gender.FEMALE)
    r = Person(first_name="R", gender=Gender.FEMALE, parent_ids=[pp.id, rm.id])
    ada = Person(first_name="Ada", gender=Gender.FEMALE, parent_ids=[p.id, q.id], is_adopted=True, biological_parent_ids=[r.id])
    return [pp, rm, p, q, r, ada], ada


def test_adoptive_and_biological_lines():
    people, ada = _adoption()
    rows = _by_name(ancestors_with_relationship(ada.id, people))
    assert rows == {
        "P": "Father - Adoptive",
        "Q": "Mother - Adoptive",
        "R": "Mother - Biological",
        "PP": "Grandfather (Paternal) - Adoptive & Grandfather (Maternal) - Biological",
        "RM": "Grandmother (Maternal) - Biological",
    }


def test_non_adopted_ignores_biological_ids():
    people, ada = _adoption()
    ada.is_adopted = False
    rows = _by_name(ancestors_with_relationship(ada.id, people))
    assert "R" not in rows
    assert rows["PP"] == "Grandfather (Paternal)"


def test_ancestor_report_unknown_person(family):
    tree, _ = family
    assert ancestors_with_relationship("nobody", tree.persons) == []


def test_descendants_with_relationship(family):
    tree, P = family
    rows = descendants_with_relationship(P["David"].id, tree.persons)
    by_name = {r["person"].first_name: (r["relationship"], r["generation"]) for r in rows}
    assert by_name["Mark"] == ("Son", 1)
    assert by_name["Sarah"] == ("Daughter", 1)
    assert by_name["Nina"] == ("Granddaughter", 2)
    assert by_name["Noah"] == ("Great-Grandson", 3)


def test_siblings_with_relationship(family):
    tree, P = family
    assert _by_name(siblings_with_relationship(P["Mark"].id, tree.persons)) == {"Sarah": "Sister"}
    assert _by_name(siblings_with_relationship(P["Alice"].id, tree.persons)) == {"David": "Brother"}
