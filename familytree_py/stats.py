"""Family statistics: head counts, average lifespan and oldest people.

Ages are counted in whole months between two partial dates. A missing month
or day counts as the first of the year / month.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .graph import People, index_people
from .models import CDate, Gender, Person


@dataclass
class Statistics:
    total_people: int
    male_count: int
    female_count: int
    average_lifespan: str
    oldest_living_person: Optional[Person] = None
    oldest_person_ever: Optional[Person] = None

    def to_dict(self):
        return {
            "total_people": self.total_people,
            "male_count": self.male_count,
            "female_count": self.female_count,
            "average_lifespan": self.average_lifespan,
            "oldest_living_person": self.oldest_living_person.id if self.oldest_living_person else None,
            "oldest_person_ever": self.oldest_person_ever.id if self.oldest_person_ever else None,
        }


def _as_date(cd: Optional[CDate]) -> Optional[date]:
    if cd is None or cd.year is None:
        return None
    try:
        return date(cd.year, cd.month or 1, cd.day or 1)
    except ValueError:
        return None


def age_in_months(birth: Optional[CDate], death: Optional[CDate] = None, today: Optional[date] = None) -> Optional[int]:
    """Whole months from birth to death (or to ``today`` when still living)."""
    start = _as_date(birth)
    if start is None:
        return None
    end = _as_date(death) if death is not None else (today or date.today())
    if end is None:
        return None
    years = end.year - start.year
    months = end.month - start.month
    if end.day < start.day:
        months -= 1
    if months < 0:
        years -= 1
        months += 12
    return years * 12 + months


def format_lifespan(total_months: float) -> str:
    if total_months is None or total_months < 0:
        return "N/A"
    years = int(total_months // 12)
    months = round(total_months % 12)
    return f"{years} years, {months} months"


def family_statistics(people: People, today: Optional[date] = None) -> Statistics:
    persons = list(index_people(people).values())
    males = sum(1 for p in persons if p.gender == Gender.MALE)
    females = sum(1 for p in persons if p.gender == Gender.FEMALE)

    lifespans = []
    for p in persons:
        if p.birth_date is None or p.death_date is None:
            continue
        months = age_in_months(p.birth_date, p.death_date)
        if months is not None and months > 0:
            lifespans.append(months)
    average = sum(lifespans) / len(lifespans) if lifespans else 0

    oldest_living = None
    oldest_ever = None
    max_living = -1
    max_ever = -1
    for p in persons:
        months = age_in_months(p.birth_date, p.death_date, today=today)
        if months is None:
            continue
        if p.death_date is None and months > max_living:
            max_living = months
            oldest_living = p
        if months > max_ever:
            max_ever = months
            oldest_ever = p

    return Statistics(
        total_people=len(persons),
        male_count=males,
        female_count=females,
        average_lifespan=format_lifespan(average),
        oldest_living_person=oldest_living,
        oldest_person_ever=oldest_ever,
    )
