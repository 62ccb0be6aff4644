"""Tests for Player movement and the pickup/craft rules."""
from __future__ import annotations

import pytest

from bitgrid import DIRECTIONS, Action, Cell, Player, apply_action, resolve_click
from bitgrid.rules import is_victory


class TestPlayer:
    def test_defaults(self) -> None:
        player = Player()
        assert player.position == (0, 0)
        assert player.held is None
        assert player.holding is False

    @pytest.mark.parametrize("name", ["north", "south", "east", "west"])
    def test_step_each_direction(self, name: str) -> None:
        player = Player(position=(10, -10))
        di, dj = DIRECTIONS[name]
        assert player.step(di, dj) == (10 + di, -10 + dj)

    def test_north_increases_row(self) -> None:
        assert DIRECTIONS["north"] == (1, 0)
        assert DIRECTIONS["east"] == (0, 1)

    @pytest.mark.parametrize(
        ("di", "dj"), [(0, 0), (1, 1), (-1, 1), (2, 0), (0, -3)]
    )
    def test_invalid_step_raises(self, di: int, dj: int) -> None:
        player = Player(position=(0, 0))
        with pytest.raises(ValueError, match="one cardinal step"):
            player.step(di, dj)
        assert player.position == (0, 0)


class TestResolveClick:
    def test_pickup(self) -> None:
        assert resolve_click(2, None) is Action.PICKUP

    def test_empty_hand_empty_cell(self) -> None:
        assert resolve_click(None, None) is Action.NONE

    def test_craft_on_match(self) -> None:
        assert resolve_click(4, 4) is Action.CRAFT

    def test_mismatch_is_noop(self) -> None:
        assert resolve_click(2, 1) is Action.NONE

    def test_holding_on_empty_cell_is_noop(self) -> None:
        assert resolve_click(None, 1) is Action.NONE


class TestApplyAction:
    def test_pickup_moves_token(self) -> None:
        cell, player = Cell(value=2), Player()
        assert apply_action(Action.PICKUP, cell, player) is None
        assert player.held == 2
        assert cell.value is None

    def test_craft_doubles(self) -> None:
        cell, player = Cell(value=2), Player(held=2)
        assert apply_action(Action.CRAFT, cell, player) == 4
        assert cell.value == 4
        assert player.held is None

    def test_craft_chain_stays_powers_of_two(self) -> None:
        cell = Cell(value=1)
        for _ in range(6):
            player = Player(held=cell.value)
            apply_action(Action.CRAFT, cell, player)
            value = cell.value
            assert value & (value - 1) == 0
        assert cell.value == 64

    def test_craft_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot craft"):
            apply_action(Action.CRAFT, Cell(value=2), Player(held=1))

    def test_none_changes_nothing(self) -> None:
        cell, player = Cell(value=1), Player(held=2)
        apply_action(Action.NONE, cell, player)
        assert cell.value == 1
        assert player.held == 2


class TestIsVictory:
    def test_threshold(self) -> None:
        assert is_victory(8, 8) is True
        assert is_victory(16, 8) is True
        assert is_victory(4, 8) is False
        assert is_victory(None, 8) is False
