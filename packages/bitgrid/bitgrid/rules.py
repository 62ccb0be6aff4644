"""Interaction rules - pickup and craft decisions for a clicked cell."""
from __future__ import annotations

from enum import Enum

from bitgrid.player import Player
from bitgrid.types import Cell


class Action(Enum):
    NONE = "none"
    PICKUP = "pickup"
    CRAFT = "craft"


def resolve_click(cell_value: int | None, held: int | None) -> Action:
    """Pick the action for a click on an in-range, visible cell.

    Pickup needs an empty hand and a non-empty cell. Craft needs a held
    token equal to the cell's token. Anything else does nothing; a held
    token is never dropped or swapped.
    """
    if held is None:
        return Action.PICKUP if cell_value is not None else Action.NONE
    if cell_value == held:
        return Action.CRAFT
    return Action.NONE


def apply_action(action: Action, cell: Cell, player: Player) -> int | None:
    """Mutate *cell* and *player* for *action*.

    Returns the crafted value for a craft, otherwise None.
    """
    if action is Action.PICKUP:
        player.held = cell.value
        cell.value = None
        return None
    if action is Action.CRAFT:
        if player.held is None or player.held != cell.value:
            raise ValueError(
                f"cannot craft held {player.held!r} onto cell value {cell.value!r}"
            )
        crafted = player.held * 2
        player.held = None
        cell.value = crafted
        return crafted
    return None


def is_victory(value: int | None, victory_value: int) -> bool:
    return value is not None and value >= victory_value
