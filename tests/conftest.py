import pytest

from crown_defense.core.game import GameSession
from crown_defense.core.game_map import GameMap


@pytest.fixture
def game_map():
    """The bundled map: 800x600 field, path width 50, Crown at (680, 480)."""
    return GameMap.load_default()


@pytest.fixture
def session(game_map):
    """Running session on normal difficulty with 100 lives and 150 money."""
    s = GameSession(game_map, seed=1)
    s.configure_session("normal", True)
    s.start_session()
    return s


@pytest.fixture
def tick_until():
    """Tick a session until predicate(session) holds; returns ticks taken."""
    def _tick(session, predicate, limit=5000):
        for i in range(limit):
            if predicate(session):
                return i
            session.update()
        raise AssertionError(f"condition not reached in {limit} ticks")
    return _tick
