"""Team model."""

from dataclasses import dataclass, field

from squad_builder.models.player import Player


@dataclass
class Team:
    """A generated team.

    ``average_skill`` is derived from ``players`` and is only written by the
    balancer's refresh helper.
    """

    id: str  # team-1, team-2, ...
    name: str
    color: str  # hex color from the palette
    players: list[Player] = field(default_factory=list)
    average_skill: float = 0.0

    @property
    def player_ids(self) -> list[str]:
        return [p.id for p in self.players]

    def index_of(self, player_id: str) -> int | None:
        """Slot of a player in this team, or None if absent."""
        for index, player in enumerate(self.players):
            if player.id == player_id:
                return index
        return None
