from familytree_py.models import Person, Gender, Marriage
from familytree_py.relationship import find_generic_path, describe_path, describe_path_segment, all_shortest_paths


def test_generic_path_through_marriage(family):
    tree, P = family
    path = find_generic_path(P["Wendy"].id, P["Mary"].id, tree.persons)
    assert [p.first_name for p in path] == ["Wendy", "Mark", "Mary"]
    assert describe_path(path) == "Wendy is the wife of Mark, who is the son of Mary."


def test_generic_path_parent_child():
    parent = Person(first_name="Parent", gender=Gender.FEMALE)
    child = Person(first_name="Child", parent_ids=[parent.id])
    parent.children_ids = [child.id]
    path = find_generic_path(parent.id, child.id, [parent, child])
    assert path == [parent, child]
    assert describe_path(path) == "Parent is the mother of Child."


def test_generic_path_unrelated(family):
    tree, P = family
    assert find_generic_path(P["Xavier"].id, P["Yvonne"].id, tree.persons) == []


def test_generic_path_depth_limit(family):
    tree, P = family
    assert find_generic_path(P["Wendy"].id, P["Mary"].id, tree.persons, max_depth=1) == []
    assert len(find_generic_path(P["Wendy"].id, P["Mary"].id, tree.persons, max_depth=2)) == 3


def test_segment_phrases_are_gendered_by_speaker():
    h = Person(first_name="H", gender=Gender.MALE)
    w = Person(first_name="W", gender=Gender.OTHER)
    h.marriages.append(Marriage(spouse_id=w.id))
    w.marriages.append(Marriage(spouse_id=h.id))
    assert describe_path_segment(h, w) == "is the husband of"
    assert describe_path_segment(w, h) == "is the spouse of"
    assert describe_path_segment(h, Person()) == "is related to"


def test_describe_path_single_person():
    assert describe_path([Person(first_name="Solo")]) == "They are the same person."


def test_all_shortest_paths_siblings():
    father = Person(first_name="F")
    mother = Person(first_name="M")
    s1 = Person(first_name="S1", parent_ids=[father.id, mother.id])
    s2 = Person(first_name="S2", parent_ids=[father.id, mother.id])
    father.children_ids = [s1.id, s2.id]
    mother.children_ids = [s1.id, s2.id]
    people = [father, mother, s1, s2]

    paths = all_shortest_paths(people, s1.id, s2.id, max_paths=10)
    tupaths = {tuple(p) for p in paths}
    assert tupaths == {(s1.id, father.id, s2.id), (s1.id, mother.id, s2.id)}

    assert all_shortest_paths(people, s1.id, s1.id) == [[s1.id]]
    assert len(all_shortest_paths(people, s1.id, s2.id, max_paths=1)) == 1


def test_all_shortest_paths_unrelated():
    a = Person(first_name="A")
    b = Person(first_name="B")
    assert all_shortest_paths([a, b], a.id, b.id) == []
