from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any
import re
import uuid


def _new_id() -> str:
    return str(uuid.uuid4())


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    @staticmethod
    def parse(value: Any) -> "Gender":
        if isinstance(value, Gender):
            return value
        if not value:
            return Gender.OTHER
        txt = str(value).strip().upper()
        if txt in ("M", "MALE"):
            return Gender.MALE
        if txt in ("F", "FEMALE"):
            return Gender.FEMALE
        return Gender.OTHER


class MarriageStatus(str, Enum):
    MARRIED = "Married"
    DIVORCED = "Divorced"
    WIDOWED = "Widowed"
    UNKNOWN = "Unknown"

    @staticmethod
    def parse(value: Any) -> "MarriageStatus":
        if isinstance(value, MarriageStatus):
            return value
        for st in MarriageStatus:
            if value and str(value).strip().lower() == st.value.lower():
                return st
        return MarriageStatus.UNKNOWN if value else MarriageStatus.MARRIED


_MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}


@dataclass
class CDate:
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    precision: Optional[str] = None  # 'year'|'month'|'day'|'approx' or None

    def to_dict(self) -> Dict[str, Any]:
        return {"year": self.year, "month": self.month, "day": self.day, "precision": self.precision}

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> Optional["CDate"]:
        if not d:
            return None
        return CDate(year=d.get("year"), month=d.get("month"), day=d.get("day"), precision=d.get("precision"))

    @staticmethod
    def coerce(value: Any) -> Optional["CDate"]:
        """Accept a CDate, a dict or a date string."""
        if isinstance(value, CDate):
            return value
        if isinstance(value, dict):
            return CDate.from_dict(value)
        if isinstance(value, str):
            return CDate.from_string(value)
        return None

    def to_iso(self) -> Optional[str]:
        if self.year is None:
            return None
        if self.month is None:
            return f"{self.year}"
        if self.day is None:
            return f"{self.year:04d}-{self.month:02d}"
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @staticmethod
    def from_string(s: Optional[str]) -> Optional["CDate"]:
        if not s:
            return None
        txt = s.strip().upper()
        if not txt:
            return None

        # ISO formats: YYYY or YYYY-MM or YYYY-MM-DD (a trailing time part is ignored)
        iso_match = re.match(r"^(\d{3,4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?(?:T.*)?$", txt)
        if iso_match:
            year = int(iso_match.group(1))
            month = int(iso_match.group(2)) if iso_match.group(2) else None
            day = int(iso_match.group(3)) if iso_match.group(3) else None
            precision = "day" if day else "month" if month else "year"
            return CDate(year=year, month=month, day=day, precision=precision)

        # '12 JAN 1900' or 'JAN 1900'
        m = re.match(r"^(?:(\d{1,2})\s+)?([A-Z]{3,9})\.?,?\s+(\d{3,4})$", txt)
        if m:
            month = _MONTHS.get(m.group(2)[:3])
            if month:
                day = int(m.group(1)) if m.group(1) else None
                return CDate(year=int(m.group(3)), month=month, day=day, precision="day" if day else "month")

        m = re.match(r"^(ABT|ABOUT|EST|CA|CIRCA)\.?\s+(\d{3,4})$", txt)
        if m:
            return CDate(year=int(m.group(2)), precision="approx")

        return None


@dataclass
class Marriage:
    spouse_id: str
    status: MarriageStatus = MarriageStatus.MARRIED
    date: Optional[str] = None
    place: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"spouse_id": self.spouse_id, "status": self.status.value, "date": self.date, "place": self.place}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Marriage":
        return Marriage(
            spouse_id=d.get("spouse_id") or d.get("spouseId"),
            status=MarriageStatus.parse(d.get("status")),
            date=d.get("date"),
            place=d.get("place"),
        )

    def reciprocal(self, person_id: str) -> "Marriage":
        """Return the mirror record stored on the spouse's side."""
        return Marriage(spouse_id=person_id, status=self.status, date=self.date, place=self.place)


def _id_list(value: Any, key: str) -> List[str]:
    """Non-empty ids of a list field; anything but a list or tuple is rejected."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{key} must be a list of ids, got {type(value).__name__}")
    return [v for v in value if v]


@dataclass
class Person:
    id: str = field(default_factory=_new_id)
    first_name: str = ""
    surname: str = ""
    gender: Gender = Gender.OTHER
    # conventionally [father, mother], never relied upon
    parent_ids: List[str] = field(default_factory=list)
    children_ids: List[str] = field(default_factory=list)
    marriages: List[Marriage] = field(default_factory=list)
    is_adopted: bool = False
    biological_parent_ids: List[str] = field(default_factory=list)
    birth_date: Optional[CDate] = None
    death_date: Optional[CDate] = None

    @property
    def full_name(self) -> str:
        return " ".join(n for n in (self.first_name, self.surname) if n)

    def spouse_ids(self) -> List[str]:
        return [m.spouse_id for m in self.marriages if m.spouse_id]

    def is_married_to(self, other_id: str) -> bool:
        return any(m.spouse_id == other_id for m in self.marriages)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "surname": self.surname,
            "gender": self.gender.value,
            "parent_ids": list(self.parent_ids),
            "children_ids": list(self.children_ids),
            "marriages": [m.to_dict() for m in self.marriages],
            "is_adopted": self.is_adopted,
            "biological_parent_ids": list(self.biological_parent_ids),
            "birth_date": self.birth_date.to_dict() if self.birth_date else None,
            "death_date": self.death_date.to_dict() if self.death_date else None,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Person":
        # snake_case keys first, then the camelCase shape of exported trees
        def _get(key: str, alt: str, default=None):
            if key in d:
                return d[key]
            return d.get(alt, default)

        return Person(
            id=d.get("id") or _new_id(),
            first_name=_get("first_name", "firstName", "") or "",
            surname=_get("surname", "lastName", "") or "",
            gender=Gender.parse(d.get("gender", d.get("sex"))),
            parent_ids=_id_list(_get("parent_ids", "parentIds"), "parent_ids"),
            children_ids=_id_list(_get("children_ids", "childrenIds"), "children_ids"),
            marriages=[Marriage.from_dict(m) for m in (d.get("marriages") or [])],
            is_adopted=bool(_get("is_adopted", "isAdopted", False)),
            biological_parent_ids=_id_list(_get("biological_parent_ids", "biologicalParentIds"), "biological_parent_ids"),
            birth_date=CDate.coerce(_get("birth_date", "birthDate")),
            death_date=CDate.coerce(_get("death_date", "deathDate")),
        )
