"""
Invariant checks over random play.

Random direction sequences drive a ball-free game (so every run plays out
its moves) and the board invariants are checked after every tick. Ball
physics and spawn safety are checked separately with balls present.
"""

from typing import List

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from axion.entities import Ball, Direction, Position
from axion.game import Game, GamePhase
from axion.grid import Cell, Grid

from tests.helpers import border_is_territory, place_player

directions = st.sampled_from(list(Direction))
move_sequences = st.lists(directions, min_size=1, max_size=100)


def ball_free_game(width: int = 20, height: int = 20) -> Game:
    game = Game(width, height, seed=0)
    game.hazards.clear()
    return game


@given(moves=move_sequences)
@settings(max_examples=60, deadline=None)
def test_fill_bounded_and_monotonic(moves: List[Direction]) -> None:
    game = ball_free_game()
    interior = game.grid.interior_area
    previous = game.filled_percentage

    for direction in moves:
        if game.phase != GamePhase.PLAYING:
            break
        game.set_direction(direction)
        game.update()

        assert 0.0 <= game.filled_percentage <= 1.0
        assert game.filled_percentage >= previous
        if game.last_classification is not None:
            assert game.last_classification.cells_filled <= interior
        previous = game.filled_percentage


@given(moves=move_sequences)
@settings(max_examples=60, deadline=None)
def test_border_and_hazards_stay_off_limits_in_live_play(moves: List[Direction]) -> None:
    game = Game(20, 20, seed=3)

    for direction in moves:
        if game.phase != GamePhase.PLAYING:
            break
        game.set_direction(direction)
        game.update()
        assert border_is_territory(game.grid)
        for hazard in game.hazards:
            assert game.cell_at(hazard.position.x, hazard.position.y) != Cell.TERRITORY


@given(moves=move_sequences)
@settings(max_examples=60, deadline=None)
def test_trail_state_consistent(moves: List[Direction]) -> None:
    game = ball_free_game()

    for direction in moves:
        if game.phase != GamePhase.PLAYING:
            break
        was_drawing = game.player.is_drawing
        game.set_direction(direction)
        game.update()
        player = game.player

        assert bool(player.trail) == player.is_drawing
        if game.phase != GamePhase.PLAYING:
            continue

        trail_cells = {(p.x, p.y) for p in player.trail}
        marked = {(p.x, p.y) for p in game.grid.interior_cells()
                  if game.cell_at(p.x, p.y) == Cell.TRAIL}
        assert marked == trail_cells

        if was_drawing and not player.is_drawing:
            # Just completed: the player is back on safe ground
            assert game.cell_at(player.position.x, player.position.y) == Cell.TERRITORY


@given(moves=move_sequences)
@settings(max_examples=60, deadline=None)
def test_win_requires_target(moves: List[Direction]) -> None:
    game = ball_free_game(12, 12)
    game.target_percentage = 0.3

    for direction in moves:
        if game.phase != GamePhase.PLAYING:
            break
        game.set_direction(direction)
        game.update()
        if game.phase == GamePhase.WON:
            assert game.filled_percentage >= game.target_percentage
        elif game.phase == GamePhase.PLAYING:
            assert game.filled_percentage < game.target_percentage


@given(
    width=st.integers(min_value=15, max_value=30),
    height=st.integers(min_value=15, max_value=30),
    moves=st.lists(directions, min_size=3, max_size=12),
)
@settings(max_examples=60, deadline=None)
def test_small_trail_fill_proportional(width: int, height: int, moves: List[Direction]) -> None:
    game = ball_free_game(width, height)
    place_player(game, 1, 0, Direction.DOWN)
    initial = game.filled_percentage

    trail_length = 0
    for direction in moves:
        if game.phase != GamePhase.PLAYING:
            break
        was_drawing = game.player.is_drawing
        game.set_direction(direction)
        game.update()
        if game.player.is_drawing:
            trail_length = len(game.player.trail)
        if was_drawing and not game.player.is_drawing:
            break

    assume(game.phase == GamePhase.PLAYING and trail_length > 0)

    increase = game.filled_percentage - initial
    total = game.grid.interior_area
    max_cells = min(trail_length * trail_length, total)
    assert increase <= 1.5 * max_cells / total
    if trail_length < 10:
        assert increase < 0.5


@given(
    obstacles=st.lists(
        st.tuples(st.integers(1, 18), st.integers(1, 18)), max_size=60
    ),
    start=st.tuples(st.integers(1, 18), st.integers(1, 18)),
    velocity=st.tuples(st.sampled_from([-1, 1]), st.sampled_from([-1, 1])),
    ticks=st.integers(min_value=1, max_value=300),
)
@settings(max_examples=60, deadline=None)
def test_ball_never_rests_on_territory(obstacles, start, velocity, ticks) -> None:
    grid = Grid(20, 20)
    for x, y in obstacles:
        grid.set(x, y, Cell.TERRITORY)
    assume(grid.cell_at(*start) == Cell.OPEN)

    ball = Ball(start[0], start[1], *velocity)
    for _ in range(ticks):
        ball.update(grid)
        x, y = ball.position.x, ball.position.y
        assert 0 < x < grid.width - 1
        assert 0 < y < grid.height - 1
        assert grid.cell_at(x, y) != Cell.TERRITORY
        assert all(v in (-1, 1) for v in ball.velocity)


def _ticks_to_contact(player: Position, facing: Direction, ball: Ball, horizon: int = 10) -> int:
    """Free-flight ticks until ball and player are within one cell."""
    px, py = player.x, player.y
    bx, by = ball.position.x, ball.position.y
    fx, fy = facing.delta
    vx, vy = ball.velocity
    for tick in range(1, horizon + 1):
        px, py = px + fx, py + fy
        bx, by = bx + vx, by + vy
        if abs(bx - px) <= 1 and abs(by - py) <= 1:
            return tick
    return horizon + 1


@given(
    width=st.integers(min_value=15, max_value=50),
    height=st.integers(min_value=15, max_value=50),
    seed=st.integers(min_value=0, max_value=2 ** 16),
)
@settings(max_examples=40, deadline=None)
def test_initial_spawn_is_safe(width: int, height: int, seed: int) -> None:
    game = Game(width, height, seed=seed)
    player = game.player

    for ball in game.hazards:
        assert ball.position.manhattan(player.position) >= game.config.MIN_SAFE_DISTANCE
        if game.spawner.in_danger_zone(ball.position, player):
            # Facing right: never heading back toward the left edge
            assert ball.velocity[0] == 1
        assert _ticks_to_contact(player.position, player.direction, ball) >= 5
