"""Data models for the lineup scoring engine."""

from dataclasses import dataclass, field
from typing import Dict, Optional

ATTRIBUTE_NAMES = ("pace", "dribbling", "passing", "physical", "defending")


@dataclass
class Player:
    """A selectable player with an overall rating and optional attributes."""

    player_id: int
    name: str
    position: str  # GK, LB, CB, RB, CDM, CM, CAM, LW, RW, ST
    club: str
    rating: int
    image_url: str = ""
    pace: Optional[int] = None
    dribbling: Optional[int] = None
    passing: Optional[int] = None
    physical: Optional[int] = None
    defending: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "Player":
        return cls(
            player_id=int(data["player_id"]),
            name=data["name"],
            position=data["position"],
            club=data.get("club") or "",
            rating=int(data["rating"]),
            image_url=data.get("image_url") or "",
            **{attr: data.get(attr) for attr in ATTRIBUTE_NAMES},
        )

    def to_dict(self) -> Dict:
        return {
            "player_id": self.player_id,
            "name": self.name,
            "position": self.position,
            "club": self.club,
            "rating": self.rating,
            "image_url": self.image_url,
            **{attr: getattr(self, attr) for attr in ATTRIBUTE_NAMES},
        }


@dataclass
class TeamStrengths:
    """Aggregated team strengths, each an integer on the rating scale."""

    defense: int = 0
    midfield: int = 0
    attack: int = 0
    speed: int = 0
    technique: int = 0
    physical: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "defense": self.defense,
            "midfield": self.midfield,
            "attack": self.attack,
            "speed": self.speed,
            "technique": self.technique,
            "physical": self.physical,
        }


@dataclass(frozen=True)
class StrategyArchetype:
    """A tactical style scored as a weighted sum of team strengths."""

    key: str
    name: str
    description: str
    icon: str
    weights: Dict[str, float] = field(default_factory=dict)


@dataclass
class StrategyScore:
    """Compatibility of one archetype with a team (0-100)."""

    archetype: StrategyArchetype
    compatibility_score: int

    @property
    def key(self) -> str:
        return self.archetype.key

    @property
    def name(self) -> str:
        return self.archetype.name
