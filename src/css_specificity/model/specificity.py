"""Specificity model: category counts and the derived weight."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class SpecificityVector:
    """Ordered (inline, id, class-like, element-like) counts.

    Ordering is lexicographic over the fields in declaration order, which is
    exactly CSS precedence.
    """

    inline: int = 0
    ids: int = 0
    class_like: int = 0
    element_like: int = 0

    @property
    def weight(self) -> int:
        return (
            self.inline * 1000
            + self.ids * 100
            + self.class_like * 10
            + self.element_like
        )

    def as_list(self) -> list[int]:
        return [self.inline, self.ids, self.class_like, self.element_like]

    def __add__(self, other: SpecificityVector) -> SpecificityVector:
        return SpecificityVector(
            inline=self.inline + other.inline,
            ids=self.ids + other.ids,
            class_like=self.class_like + other.class_like,
            element_like=self.element_like + other.element_like,
        )


ZERO = SpecificityVector()


@dataclass(frozen=True)
class SpecificityResult:
    """The maximum vector of a selector list, its weight, and a display string."""

    vector: SpecificityVector
    weight: int
    formatted: str

    @classmethod
    def from_vector(cls, vector: SpecificityVector) -> SpecificityResult:
        weight = vector.weight
        counts = ",".join(str(n) for n in vector.as_list())
        return cls(vector=vector, weight=weight, formatted=f"({counts}) = {weight}")

    def to_dict(self) -> dict[str, object]:
        return {
            "vector": self.vector.as_list(),
            "weight": self.weight,
            "formatted": self.formatted,
        }
