"""
Tests for reversi.agent.interactive

Tests the selection boundary and interactive players.
"""

import asyncio

import numpy as np
import pytest

from conftest import wait_until
from reversi.agent.interactive import CellSelector, InteractivePlayer
from reversi.agent.player import Player
from reversi.games.game_state import GameState


def mask_with(*cells) -> np.ndarray:
    mask = np.zeros((8, 8), dtype=bool)
    for r, c in cells:
        mask[r, c] = True
    return mask


class TestCellSelector:
    """CellSelector tests."""

    @pytest.mark.asyncio
    async def test_legal_selection_resolves(self, selector: CellSelector):
        """A selection inside the mask resolves and removes the request."""
        _, future = selector.request(mask_with((2, 3)))
        assert selector.select(2, 3) is True
        assert await future == (2, 3)
        assert len(selector) == 0

    @pytest.mark.asyncio
    async def test_illegal_selection_ignored(self, selector: CellSelector):
        """A selection outside the mask resolves nothing."""
        _, future = selector.request(mask_with((2, 3)))
        assert selector.select(0, 0) is False
        assert not future.done()
        assert len(selector) == 1

    @pytest.mark.asyncio
    async def test_off_board_ignored(self, selector: CellSelector):
        """Coordinates off the board are ignored."""
        selector.request(mask_with((2, 3)))
        assert selector.select(8, 0) is False
        assert selector.select(-1, 3) is False
        assert len(selector) == 1

    @pytest.mark.asyncio
    async def test_one_request_per_selection(self, selector: CellSelector):
        """Only the oldest matching request is satisfied."""
        _, older = selector.request(mask_with((2, 3)))
        _, newer = selector.request(mask_with((2, 3)))
        assert selector.select(2, 3)
        assert older.done() and not newer.done()
        assert selector.select(2, 3)
        assert newer.done()
        assert selector.select(2, 3) is False

    @pytest.mark.asyncio
    async def test_matching_skips_non_accepting(self, selector: CellSelector):
        """A request whose mask rejects the cell is passed over."""
        _, first = selector.request(mask_with((0, 0)))
        _, second = selector.request(mask_with((2, 3)))
        assert selector.select(2, 3)
        assert second.done() and not first.done()

    @pytest.mark.asyncio
    async def test_cancel(self, selector: CellSelector):
        """Cancelling drops the request and its future."""
        request_id, future = selector.request(mask_with((2, 3)))
        selector.cancel(request_id)
        assert future.cancelled()
        assert selector.select(2, 3) is False
        selector.cancel(request_id)  # second cancel is harmless


class TestInteractivePlayer:
    """InteractivePlayer tests."""

    def test_protocol(self, selector: CellSelector):
        """Interactive players satisfy Player and are undoable."""
        player = InteractivePlayer(selector)
        assert isinstance(player, Player)
        assert player.undoable is True

    @pytest.mark.asyncio
    async def test_waits_for_legal_selection(self, selector: CellSelector, opening: GameState):
        """select_move resolves on the first legal selection only."""
        player = InteractivePlayer(selector)
        task = asyncio.ensure_future(player.select_move(opening))
        await wait_until(lambda: len(selector) == 1)

        assert selector.select(0, 0) is False
        await asyncio.sleep(0)
        assert not task.done()

        assert selector.select(5, 4) is True
        assert await task == (5, 4)
        assert len(selector) == 0

    @pytest.mark.asyncio
    async def test_cancel_releases_request(self, selector: CellSelector, opening: GameState):
        """A cancelled move request leaves nothing pending."""
        player = InteractivePlayer(selector)
        task = asyncio.ensure_future(player.select_move(opening))
        await wait_until(lambda: len(selector) == 1)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert len(selector) == 0
        assert selector.select(2, 3) is False
