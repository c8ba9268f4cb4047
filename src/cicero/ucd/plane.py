"""Unicode planes."""

from __future__ import annotations

from dataclasses import dataclass


PLANE_COUNT = 17
PLANE_SIZE = 0x1_0000
_PLANE_NAMES: tuple[str, ...] = (
    "Basic Multilingual Plane",
    "Supplementary Multilingual Plane",
    "Supplementary Ideographic Plane",
    "Tertiary Ideographic Plane",
    "Unassigned (Plane 4)",
    "Unassigned (Plane 5)",
    "Unassigned (Plane 6)",
    "Unassigned (Plane 7)",
    "Unassigned (Plane 8)",
    "Unassigned (Plane 9)",
    "Unassigned (Plane 10)",
    "Unassigned (Plane 11)",
    "Unassigned (Plane 12)",
    "Unassigned (Plane 13)",
    "Supplementary Special-purpose Plane",
    "Supplementary Private Use Area (Plane 15)",
    "Supplementary Private Use Area (Plane 16)",
)


@dataclass(frozen=True, slots=True)
class CodePointSpan:
    """Inclusive span of code points."""

    start: int
    end: int

    def __contains__(self, code_point: object) -> bool:
        if not isinstance(code_point, int):
            return False
        return self.start <= code_point <= self.end


@dataclass(frozen=True, slots=True)
class Plane:
    """A Unicode plane with its conventional name."""

    name: str
    range: CodePointSpan

    @classmethod
    def at(cls, index: int) -> Plane:
        if not 0 <= index < PLANE_COUNT:
            raise ValueError(f"Plane index out of range: {index}")
        return cls(
            name=_PLANE_NAMES[index],
            range=CodePointSpan(index * PLANE_SIZE, (index + 1) * PLANE_SIZE - 1),
        )

    @classmethod
    def of(cls, char: str | int) -> Plane:
        code_point = char if isinstance(char, int) else ord(char)
        return cls.at(code_point // PLANE_SIZE)


def plane_names() -> tuple[str, ...]:
    return _PLANE_NAMES


__all__ = ["PLANE_COUNT", "PLANE_SIZE", "CodePointSpan", "Plane", "plane_names"]
