"""Errors raised by the team-composition engine."""


class SquadBuilderError(Exception):
    """Base class for engine errors."""


class InsufficientPlayersError(SquadBuilderError, ValueError):
    """More teams requested than players supplied."""


class PlayerNotFoundError(SquadBuilderError, LookupError):
    """A referenced player is not where the caller said it is."""


class TeamNotFoundError(SquadBuilderError, LookupError):
    """A referenced team id is not part of the team set."""


class PositionOutOfRangeError(SquadBuilderError, IndexError):
    """A slot index is outside a team's player list."""


class EditorSessionError(SquadBuilderError, RuntimeError):
    """Editor operation attempted without an open session."""


class InvalidTeamSetError(SquadBuilderError, ValueError):
    """Team set repeats a team id or places a player in more than one team."""
