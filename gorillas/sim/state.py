from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..constants import PLAYER_ONE, PLAYER_TWO
from ..gen.recipe import city_digest
from .projectile import Projectile
from .world import Avatar, City


def other_player(player: int) -> int:
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


@dataclass(frozen=True)
class MatchState:
    city: City
    avatars: tuple[Avatar, Avatar]
    current_player: int = PLAYER_ONE
    scores: tuple[int, int] = (0, 0)
    wind: int = 0
    projectile: Projectile | None = None
    game_over: bool = False
    winner: int | None = None
    round: int = 1

    def avatar(self, player: int) -> Avatar:
        return self.avatars[player - 1]

    @property
    def shooter(self) -> Avatar:
        return self.avatar(self.current_player)

    @property
    def opponent(self) -> Avatar:
        return self.avatar(other_player(self.current_player))

    @property
    def in_flight(self) -> bool:
        return self.projectile is not None

    def to_dict(self) -> dict[str, Any]:
        """Read-only snapshot for renderers and controllers."""
        return {
            "round": self.round,
            "current_player": self.current_player,
            "scores": list(self.scores),
            "wind": self.wind,
            "game_over": self.game_over,
            "winner": self.winner,
            "city": self.city.to_dict(),
            "city_digest": city_digest(self.city),
            "avatars": [a.to_dict() for a in self.avatars],
            "projectile": self.projectile.to_dict() if self.projectile is not None else None,
        }


def award_loss(state: MatchState, loser: int) -> MatchState:
    """End the round: the player who was hit loses, the other one scores."""
    winner = other_player(loser)
    scores = list(state.scores)
    scores[winner - 1] += 1
    return replace(
        state,
        projectile=None,
        game_over=True,
        winner=winner,
        scores=(scores[0], scores[1]),
    )
