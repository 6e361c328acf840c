"""Player model."""

from dataclasses import dataclass

# Sub-skills that together form a composite score
POSITION_ATTRIBUTES = ("forward", "midfield", "defender")


@dataclass
class Player:
    """A rated player from the roster.

    Only ``skill_rating`` and ``position_skills`` take part in team balancing;
    the remaining fields are carried through untouched.
    """

    id: str
    skill_rating: int  # conventionally 1-10
    position_skills: dict[str, int] | None = None  # forward, midfield, defender
    name: str = ""
    avatar: str = ""
    wins: int = 0
    matches_played: int = 0

    @property
    def has_position_skills(self) -> bool:
        """True when all three position ratings are numeric."""
        if not self.position_skills:
            return False
        for attribute in POSITION_ATTRIBUTES:
            value = self.position_skills.get(attribute)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
        return True
