import sys
from pathlib import Path

import pytest

# Ensure repo root is on sys.path so tests can import the package directly
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from familytree_py.models import Person, Gender  # noqa: E402
from familytree_py.tree import FamilyTree  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch):
    """Keep a developer's FAMILYTREE_* variables out of the tests."""
    for var in ("FAMILYTREE_CONFIG", "FAMILYTREE_LOG_LEVEL", "FAMILYTREE_MAX_PATH_DEPTH", "FAMILYTREE_MAX_PATHS"):
        monkeypatch.delenv(var, raising=False)


def build_family():
    """Four generations plus in-laws and two strangers.

    George+Grace -> David, Alice
    David+Mary -> Mark, Sarah          Alice+Ulrich -> Clara
    Mark+Wendy -> Sam                  Clara+Henry -> Kevin -> Kim
    Sam+Dora                           Sarah+Tom -> Nina -> Noah
    Xavier, Yvonne: unrelated to everybody
    """
    tree = FamilyTree(name="fixture")
    P = {}

    def add(name, gender, *parents):
        P[name] = tree.add_person(Person(first_name=name, gender=gender, parent_ids=[P[p].id for p in parents]))

    add("George", Gender.MALE)
    add("Grace", Gender.FEMALE)
    add("David", Gender.MALE, "George", "Grace")
    add("Alice", Gender.FEMALE, "George", "Grace")
    add("Mary", Gender.FEMALE)
    add("Ulrich", Gender.MALE)
    add("Mark", Gender.MALE, "David", "Mary")
    add("Sarah", Gender.FEMALE, "David", "Mary")
    add("Clara", Gender.FEMALE, "Alice", "Ulrich")
    add("Wendy", Gender.FEMALE)
    add("Henry", Gender.MALE)
    add("Tom", Gender.MALE)
    add("Sam", Gender.MALE, "Mark", "Wendy")
    add("Kevin", Gender.MALE, "Clara", "Henry")
    add("Kim", Gender.FEMALE, "Kevin")
    add("Nina", Gender.FEMALE, "Sarah", "Tom")
    add("Noah", Gender.MALE, "Nina")
    add("Dora", Gender.FEMALE)
    tree.add_marriage(P["Sam"].id, P["Dora"].id)
    add("Xavier", Gender.MALE)
    add("Yvonne", Gender.FEMALE)
    return tree, P


@pytest.fixture
def family():
    return build_family()
