"""Built-in formations and their slot layouts."""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class FormationSlot:
    """A slot in a formation: required position and pitch coordinates."""

    slot_id: str
    position: str
    left: str
    top: str


@dataclass(frozen=True)
class Formation:
    """A named arrangement of eleven slots."""

    name: str
    slots: Tuple[FormationSlot, ...] = field(default_factory=tuple)


def _formation(name: str, rows: List[Tuple[str, str, str, str]]) -> Formation:
    return Formation(
        name=name,
        slots=tuple(FormationSlot(*row) for row in rows),
    )


FORMATIONS: Tuple[Formation, ...] = (
    _formation("4-3-3", [
        ("GK", "GK", "50%", "90%"),
        ("LB", "LB", "20%", "75%"),
        ("CB1", "CB", "40%", "75%"),
        ("CB2", "CB", "60%", "75%"),
        ("RB", "RB", "80%", "75%"),
        ("CDM", "CDM", "30%", "55%"),
        ("CM", "CM", "50%", "55%"),
        ("CAM", "CAM", "70%", "55%"),
        ("LW", "LW", "20%", "30%"),
        ("ST", "ST", "50%", "30%"),
        ("RW", "RW", "80%", "30%"),
    ]),
    _formation("4-4-2", [
        ("GK", "GK", "50%", "90%"),
        ("LB", "LB", "20%", "75%"),
        ("CB1", "CB", "40%", "75%"),
        ("CB2", "CB", "60%", "75%"),
        ("RB", "RB", "80%", "75%"),
        ("LM", "LW", "20%", "55%"),
        ("CM1", "CM", "40%", "55%"),
        ("CM2", "CM", "60%", "55%"),
        ("RM", "RW", "80%", "55%"),
        ("ST1", "ST", "40%", "30%"),
        ("ST2", "ST", "60%", "30%"),
    ]),
    _formation("3-5-2", [
        ("GK", "GK", "50%", "90%"),
        ("CB1", "CB", "30%", "75%"),
        ("CB2", "CB", "50%", "75%"),
        ("CB3", "CB", "70%", "75%"),
        ("LM", "LW", "15%", "55%"),
        ("CDM1", "CDM", "35%", "55%"),
        ("CM", "CM", "50%", "55%"),
        ("CDM2", "CDM", "65%", "55%"),
        ("RM", "RW", "85%", "55%"),
        ("ST1", "ST", "40%", "30%"),
        ("ST2", "ST", "60%", "30%"),
    ]),
    _formation("4-2-3-1", [
        ("GK", "GK", "50%", "90%"),
        ("LB", "LB", "20%", "75%"),
        ("CB1", "CB", "40%", "75%"),
        ("CB2", "CB", "60%", "75%"),
        ("RB", "RB", "80%", "75%"),
        ("CDM1", "CDM", "40%", "60%"),
        ("CDM2", "CDM", "60%", "60%"),
        ("CAM", "CAM", "50%", "45%"),
        ("LW", "LW", "25%", "35%"),
        ("RW", "RW", "75%", "35%"),
        ("ST", "ST", "50%", "25%"),
    ]),
    _formation("3-4-3", [
        ("GK", "GK", "50%", "90%"),
        ("CB1", "CB", "30%", "75%"),
        ("CB2", "CB", "50%", "75%"),
        ("CB3", "CB", "70%", "75%"),
        ("LM", "LW", "20%", "55%"),
        ("CM1", "CM", "40%", "55%"),
        ("CM2", "CM", "60%", "55%"),
        ("RM", "RW", "80%", "55%"),
        ("LW", "LW", "25%", "30%"),
        ("ST", "ST", "50%", "30%"),
        ("RW", "RW", "75%", "30%"),
    ]),
)


def list_formation_names() -> List[str]:
    return [formation.name for formation in FORMATIONS]


def get_formation(name: str) -> Formation:
    """Look up a built-in formation by name (e.g. "4-3-3")."""
    for formation in FORMATIONS:
        if formation.name == name:
            return formation
    raise ValueError(
        f"Unknown formation '{name}'. Must be one of: {list_formation_names()}"
    )
