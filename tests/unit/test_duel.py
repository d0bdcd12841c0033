import pytest

from gorillas.arena.duel import play_round, resolve_throw
from gorillas.sim.collision import TERRAIN
from gorillas.sim.match import Match


@pytest.fixture
def match(make_state):
    """Match on an empty skyline so every throw ends on the ground or an avatar."""
    m = Match(seed=0)
    m.state = make_state(p1=(100.0, 200.0), p2=(500.0, 200.0))
    return m


def test_throw_into_the_ground_blasts_terrain_and_passes_turn(match):
    outcome = resolve_throw(match, 45.0, 20.0)
    assert outcome.thrower == 1
    assert outcome.result.target == TERRAIN
    assert outcome.killed is None
    assert outcome.explosion is not None
    assert outcome.explosion[1] >= 343.0
    assert outcome.ticks == 72
    assert match.state.current_player == 2
    assert not match.state.game_over


def test_throw_that_lands_on_opponent(match, make_state):
    match.state = make_state(p1=(100.0, 200.0), p2=(193.0, 315.0))
    outcome = resolve_throw(match, 45.0, 20.0)
    assert outcome.result.target == 2
    assert outcome.killed == 2
    assert match.state.winner == 1
    assert match.state.scores == (1, 0)


def test_dropped_banana_blows_up_thrower(match):
    outcome = resolve_throw(match, 45.0, 1.0)
    assert outcome.self_kill
    assert outcome.killed == 1
    assert outcome.ticks == 0
    assert outcome.explosion == (100.0, 200.0, 30.0)
    assert match.state.winner == 2
    assert match.state.scores == (0, 1)


def test_throw_after_round_over_does_nothing(match):
    resolve_throw(match, 45.0, 1.0)
    before = match.state
    outcome = resolve_throw(match, 45.0, 50.0)
    assert outcome.ticks == 0
    assert outcome.killed is None
    assert match.state is before


def test_unresolved_throw_raises(match):
    with pytest.raises(RuntimeError):
        resolve_throw(match, 45.0, 20.0, max_ticks=5)


def test_play_round_stops_at_winner(match):
    outcome = play_round(match, [(45.0, 1.0), (45.0, 50.0), (60.0, 70.0)])
    assert outcome.winner == 2
    assert outcome.scores == (0, 1)
    assert len(outcome.throws) == 1


def test_play_round_alternates_throwers(match):
    outcome = play_round(match, [(45.0, 20.0), (45.0, 20.0)])
    assert [t.thrower for t in outcome.throws] == [1, 2]
    assert outcome.winner is None


def test_unresolved_throw_leaves_match_playable(match):
    with pytest.raises(RuntimeError):
        resolve_throw(match, 45.0, 20.0, max_ticks=1)
    assert not match.state.in_flight
    assert not match.state.game_over

    outcome = resolve_throw(match, 45.0, 20.0)
    assert outcome.ticks > 0
    assert outcome.result.target == TERRAIN
