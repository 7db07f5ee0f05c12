"""
Course data models.

Contains the Course and AssessmentItem dataclasses describing what a course
is graded on, and the When dataclass naming the semester being tracked.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AssessmentItem:
    """
    A single weighted piece of assessment.

    Attributes:
        name: Assessment title as listed in the course profile (e.g., "Final Exam")
        weight: Percentage of the final grade this item is worth (0-100)
    """
    name: str
    weight: float


@dataclass(frozen=True)
class Course:
    """
    A course and its assessment items, in profile order.

    Courses are immutable once loaded: a scorecard keeps a reference to the
    same Course for as long as its tab is open.

    Attributes:
        name: Course code, uppercased (e.g., "CSSE1001")
        items: Ordered assessment items
    """
    name: str
    items: tuple = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Serialize in the on-disk cache format."""
        return {
            "name": self.name,
            "assessment": [{"name": a.name, "weight": a.weight} for a in self.items],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Course":
        """
        Build a Course from the on-disk cache format.

        Raises:
            KeyError, TypeError, ValueError: if the data is not shaped like
            the output of to_dict()
        """
        items = tuple(
            AssessmentItem(str(a["name"]), float(a["weight"]))
            for a in data["assessment"]
        )
        return cls(str(data["name"]), items)


@dataclass(frozen=True)
class When:
    """
    The semester whose course profiles are looked up.

    Attributes:
        semester: 1 or 2 for the regular semesters, 3 for summer
        year: Calendar year the semester belongs to (summer runs Dec-Feb
              and belongs to the year it starts in)
        fully_qualified: Human label matching the course site's offering
                         names (e.g., "Semester 1, 2024")
    """
    semester: int
    year: int
    fully_qualified: str
