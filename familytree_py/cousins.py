"""Cousin / kinship label helpers.

APIs:
    cousin_label(l1, l2) -> (label, degree, removed)
    describe_blood_relationship(person1, person2, lca, path1, path2) -> str
    ancestor_term / descendant_term / sibling_term / spouse_term
    aunt_nephew_term / cousin_term / in_law_term / lineage_qualifier

Inputs l1 and l2 (or d1, d2) are generation distances from each person to
their lowest common ancestor (LCA). For example:
    - parent <-> child : l1=0, l2=1
    - siblings: l1=1, l2=1
    - first cousins: l1=2, l2=2
    - aunt/niece: l1=1, l2=2 (first is aunt/uncle relative to second)

Gendered terms fall back to the neutral word ("Parent", "Sibling", "Child")
when the gender is Other.
"""
from typing import Optional, Sequence, Tuple

from .models import Gender, Person

ADOPTIVE = "Adoptive"
BIOLOGICAL = "Biological"


def _gendered(gender: Gender, male: str, female: str, neutral: str) -> str:
    if gender == Gender.MALE:
        return male
    if gender == Gender.FEMALE:
        return female
    return neutral


def ordinal(n: int) -> str:
    if n <= 0:
        return str(n)
    if 11 <= (n % 100) <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _great(d: int) -> str:
    return "Great-" * max(d - 2, 0)


def ancestor_term(gender: Gender, d: int) -> str:
    """Term for somebody ``d`` generations above (1 = parent)."""
    if d == 1:
        return _gendered(gender, "Father", "Mother", "Parent")
    grand = _gendered(gender, "Grandfather", "Grandmother", "Grandparent")
    return f"{_great(d)}{grand}"


def descendant_term(gender: Gender, d: int) -> str:
    """Term for somebody ``d`` generations below (1 = child)."""
    if d == 1:
        return _gendered(gender, "Son", "Daughter", "Child")
    grand = _gendered(gender, "Grandson", "Granddaughter", "Grandchild")
    return f"{_great(d)}{grand}"


def sibling_term(gender: Gender) -> str:
    return _gendered(gender, "Brother", "Sister", "Sibling")


def spouse_term(gender: Gender) -> str:
    return _gendered(gender, "Husband", "Wife", "Spouse")


def aunt_nephew_term(gender: Gender, d1: int, d2: int) -> str:
    """Person2's term when one side is a direct child of the LCA.

    ``gender`` is person2's. Person1 on the senior line (d1 < d2) makes
    person2 a nephew/niece, otherwise an uncle/aunt. Each generation beyond
    the first degree of removal adds one "Grand-".
    """
    removal = abs(d1 - d2)
    prefix = "Grand-" * max(removal - 1, 0)
    if d1 < d2:
        relation = _gendered(gender, "Nephew", "Niece", "Nephew/Niece")
    else:
        relation = _gendered(gender, "Uncle", "Aunt", "Aunt/Uncle")
    return f"{prefix}{relation}"


def _removal_suffix(removed: int) -> str:
    if removed <= 0:
        return ""
    if removed == 1:
        return ", once removed"
    if removed == 2:
        return ", twice removed"
    return f", {removed} times removed"


def cousin_term(d1: int, d2: int) -> str:
    degree = min(d1, d2) - 1
    return f"{ordinal(degree)} cousin{_removal_suffix(abs(d1 - d2))}"


def cousin_label(l1: int, l2: int) -> Tuple[str, Optional[int], Optional[int]]:
    """Return (label, degree, removed) for distances l1,l2 to the LCA.

    label is the gender neutral term for the second person as seen from the
    first, the same reading as ``describe_blood_relationship``: (2, 1) is
    "aunt/uncle", (1, 2) "nephew/niece". degree and removed are meaningful for
    collateral relations (degree 0 covers siblings and aunt/uncle lines). For
    ancestor/descendant cases (one distance == 0) degree and removed are None.
    """
    if l1 < 0 or l2 < 0:
        raise ValueError("l1 and l2 must be non-negative integers")

    if l1 == 0 and l2 == 0:
        return "self", None, None

    # first person is the LCA: the second descends from them
    if l1 == 0:
        return descendant_term(Gender.OTHER, l2).lower(), None, None
    if l2 == 0:
        return ancestor_term(Gender.OTHER, l1).lower(), None, None

    degree = min(l1, l2) - 1
    removed = abs(l1 - l2)

    if degree == 0:
        if removed == 0:
            return sibling_term(Gender.OTHER).lower(), 0, 0
        return aunt_nephew_term(Gender.OTHER, l1, l2).lower(), 0, removed

    return cousin_term(l1, l2), degree, removed


def describe_blood_relationship(person1: Person, person2: Person, lca: Person, path1: Sequence[Person], path2: Sequence[Person]) -> str:
    """Describe person2's relationship to person1 from their LCA paths."""
    d1 = len(path1) - 1
    d2 = len(path2) - 1

    if d1 == 0 and d2 == 0:
        return "Self"

    # person1 is the LCA: person2 descends from person1
    if lca.id == person1.id:
        return descendant_term(person2.gender, d2)

    # person2 is the LCA: person2 is an ancestor of person1
    if lca.id == person2.id:
        return ancestor_term(person2.gender, d1)

    if d1 == 1 and d2 == 1:
        return sibling_term(person2.gender)

    if min(d1, d2) == 1:
        return aunt_nephew_term(person2.gender, d1, d2)

    return cousin_term(d1, d2)


def lineage_qualifier(parent: Person) -> Optional[str]:
    """Paternal / Maternal for the parent a line branches from, None if unknown."""
    if parent.gender == Gender.MALE:
        return "Paternal"
    if parent.gender == Gender.FEMALE:
        return "Maternal"
    return None


def in_law_term(person: Person, generation: int) -> Optional[str]:
    """Term for ``person`` married to a descendant ``generation`` levels down.

    Only the descending case is named; Other gender gets no label.
    """
    if generation < 1:
        return None
    if person.gender == Gender.FEMALE:
        return f"{descendant_term(Gender.MALE, generation)}'s Wife (Bahu)"
    if person.gender == Gender.MALE:
        return f"{descendant_term(Gender.FEMALE, generation)}'s Husband (Damad)"
    return None
