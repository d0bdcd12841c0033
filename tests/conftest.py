import pytest

from gorillas.config import MatchConfig
from gorillas.sim.projectile import Projectile
from gorillas.sim.state import MatchState
from gorillas.sim.world import Avatar, Building, City, Window


class ScriptedRandom:
    """RandomSource that replays fixed values; integer draws are checked against their range."""

    def __init__(self, ints=(), reals=(), default_real=0.0):
        self.ints = list(ints)
        self.reals = list(reals)
        self.default_real = default_real

    def integers(self, low, high):
        if not self.ints:
            raise AssertionError(f"unexpected integer draw in [{low}, {high})")
        value = self.ints.pop(0)
        assert low <= value < high, f"scripted {value} outside [{low}, {high})"
        return value

    def random(self):
        if self.reals:
            return self.reals.pop(0)
        return self.default_real


@pytest.fixture
def scripted_rng():
    def _make(ints=(), reals=(), default_real=0.0) -> ScriptedRandom:
        return ScriptedRandom(ints=ints, reals=reals, default_real=default_real)

    return _make


@pytest.fixture
def config() -> MatchConfig:
    return MatchConfig()


@pytest.fixture
def make_building():
    def _make(x: float, width: float, height: float, windows=(), bottom_line: float = 335.0) -> Building:
        return Building(
            x=float(x),
            y=float(bottom_line - height),
            width=float(width),
            height=float(height),
            color="#AA0000",
            windows=tuple(Window(x=float(wx), y=float(wy), lit=True) for wx, wy in windows),
        )

    return _make


@pytest.fixture
def make_state():
    def _make(
        buildings=(),
        p1=(100.0, 200.0),
        p2=(500.0, 200.0),
        current_player: int = 1,
        wind: int = 0,
        scores=(0, 0),
        projectile=None,
    ) -> MatchState:
        return MatchState(
            city=City(buildings=tuple(buildings), slope=1),
            avatars=(Avatar(x=p1[0], y=p1[1], player=1), Avatar(x=p2[0], y=p2[1], player=2)),
            current_player=current_player,
            scores=tuple(scores),
            wind=wind,
            projectile=projectile,
        )

    return _make


@pytest.fixture
def make_projectile():
    def _make(x: float, y: float, init_vx: float = 0.0, init_vy: float = 0.0, time: float = 0.0, player: int = 1) -> Projectile:
        return Projectile(
            x=x,
            y=y,
            angle=0.0,
            start_x=x,
            start_y=y,
            init_vx=init_vx,
            init_vy=init_vy,
            time=time,
            player=player,
        )

    return _make
