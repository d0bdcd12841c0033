from .config import ArenaConfig, AvatarConfig, CityConfig, MatchConfig, PhysicsConfig
from .sim.match import Match
from .sim.state import MatchState

__all__ = ["ArenaConfig", "AvatarConfig", "CityConfig", "Match", "MatchConfig", "MatchState", "PhysicsConfig"]
