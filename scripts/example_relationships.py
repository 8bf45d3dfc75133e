"""Small example script that demonstrates relationship utilities.

Builds a three-generation family in memory and prints:
 - the ancestors of the youngest person with their kinship terms
 - the relationship between two cousins and between two in-laws
 - all relationships between a person and their sister-in-law
 - an example cousin label

Run:
    python scripts/example_relationships.py
"""
from pathlib import Path
import sys

# Ensure repo root is on sys.path when running this script directly
repo_root = Path(__file__).resolve().parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from familytree_py.models import Person, Gender
from familytree_py.tree import FamilyTree
from familytree_py.reports import ancestors_with_relationship
from familytree_py.kinship import find_relationship, find_all_relationships
from familytree_py.cousins import cousin_label


def build_demo(tree: FamilyTree):
    # Arthur+Beatrice -> Charles, Diana; Charles+Emma -> Frank; Diana+George -> Hannah
    arthur = tree.add_person(Person(first_name="Arthur", gender=Gender.MALE))
    beatrice = tree.add_person(Person(first_name="Beatrice", gender=Gender.FEMALE))
    charles = tree.add_person(Person(first_name="Charles", gender=Gender.MALE, parent_ids=[arthur.id, beatrice.id]))
    diana = tree.add_person(Person(first_name="Diana", gender=Gender.FEMALE, parent_ids=[arthur.id, beatrice.id]))
    emma = tree.add_person(Person(first_name="Emma", gender=Gender.FEMALE))
    george = tree.add_person(Person(first_name="George", gender=Gender.MALE))
    frank = tree.add_person(Person(first_name="Frank", gender=Gender.MALE, parent_ids=[charles.id, emma.id]))
    hannah = tree.add_person(Person(first_name="Hannah", gender=Gender.FEMALE, parent_ids=[diana.id, george.id]))
    return arthur, beatrice, charles, diana, emma, george, frank, hannah


def main():
    tree = FamilyTree(name="demo")
    arthur, beatrice, charles, diana, emma, george, frank, hannah = build_demo(tree)
    people = tree.persons

    print("Ancestors of Frank:")
    for e in ancestors_with_relationship(frank.id, people):
        print(f"  {e['person'].full_name}: {e['relationship']}")

    print("\nHannah is Frank's:")
    rel = find_relationship(frank.id, hannah.id, people)
    print(f"  {rel.description} (kind={rel.kind})")

    print("\nEmma is Arthur's:")
    rel = find_relationship(arthur.id, emma.id, people)
    print(f"  {rel.description}")

    print("\nAll relationships of George to Charles:")
    for r in find_all_relationships(charles.id, george.id, people):
        print(f"  - {r.description} (length={r.path_length})")

    print("\nCousin label example (l1=2, l2=3):")
    label, degree, removed = cousin_label(2, 3)
    print(f"  {label} (degree={degree}, removed={removed})")


if __name__ == "__main__":
    main()
