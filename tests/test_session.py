"""Tests for GameSession wiring."""

import asyncio

import pytest

from grid_snake.config import GameConfig
from grid_snake.session import GameSession
from grid_snake.snake import Direction
from grid_snake.store import MemoryBestScoreStore


@pytest.fixture()
async def session():
    s = GameSession(GameConfig(), MemoryBestScoreStore(initial=120), seed=0)
    yield s
    await s.close()


class TestSessionLifecycle:
    @pytest.mark.asyncio
    async def test_best_score_loaded(self, session):
        assert session.engine.best_score == 120
        assert session.get_state()["best_score"] == 120

    @pytest.mark.asyncio
    async def test_empty_store_starts_at_zero(self):
        s = GameSession(store=MemoryBestScoreStore(), seed=0)
        assert s.engine.best_score == 0
        await s.close()

    @pytest.mark.asyncio
    async def test_toggle_arms_and_cancels_scheduler(self, session):
        state = await session.toggle()
        assert not state["is_paused"]
        assert session.scheduler.running
        state = await session.toggle()
        assert state["is_paused"]
        assert not session.scheduler.running

    @pytest.mark.asyncio
    async def test_restart_resumes_fresh_game(self, session):
        session.engine.score = 50
        state = await session.restart()
        assert state["score"] == 0
        assert not state["is_paused"]
        assert session.scheduler.running

    @pytest.mark.asyncio
    async def test_reset_leaves_paused(self, session):
        await session.toggle()
        state = await session.reset()
        assert state["is_paused"]
        assert not session.scheduler.running

    @pytest.mark.asyncio
    async def test_close_flushes_best_score(self):
        store = MemoryBestScoreStore()
        s = GameSession(store=store, seed=0)
        s.start()
        s.engine.best_score = 30
        await s.close()
        assert store.value == 30


class TestSessionInput:
    @pytest.mark.asyncio
    async def test_arrow_key_sets_direction(self, session):
        assert await session.handle_key("ArrowUp")
        assert session.engine.pending_direction == Direction.UP

    @pytest.mark.asyncio
    async def test_letter_keys_case_insensitive(self, session):
        assert await session.handle_key("S")
        assert session.engine.pending_direction == Direction.DOWN

    @pytest.mark.asyncio
    async def test_space_toggles(self, session):
        assert await session.handle_key(" ")
        assert not session.engine.is_paused

    @pytest.mark.asyncio
    async def test_enter_restarts(self, session):
        session.engine.score = 40
        assert await session.handle_key("Enter")
        assert session.engine.score == 0
        assert not session.engine.is_paused

    @pytest.mark.asyncio
    async def test_unbound_key(self, session):
        assert not await session.handle_key("q")
        assert session.engine.is_paused


class TestSessionListeners:
    @pytest.mark.asyncio
    async def test_listener_sees_control_changes(self, session):
        received = []

        async def listener(state):
            received.append(state["status"])

        session.add_listener(listener)
        await session.toggle()
        await session.toggle()
        assert received == ["running", "paused"]

    @pytest.mark.asyncio
    async def test_listener_sees_ticks(self):
        s = GameSession(GameConfig(base_tick_ms=5, min_tick_ms=1), seed=0)
        ticks = []

        async def listener(state):
            ticks.append(state["ticks"])

        s.add_listener(listener)
        await s.toggle()
        await asyncio.sleep(0.05)
        await s.close()
        assert any(t > 0 for t in ticks)

    @pytest.mark.asyncio
    async def test_removed_listener_not_called(self, session):
        received = []

        async def listener(state):
            received.append(state)

        session.add_listener(listener)
        session.remove_listener(listener)
        await session.toggle()
        assert received == []


class TestSessionFailures:
    @pytest.mark.asyncio
    async def test_failing_listener_does_not_starve_others(self):
        s = GameSession(GameConfig(base_tick_ms=5, min_tick_ms=1), seed=0)
        published = []

        async def recorder(state):
            published.append(state)

        async def broken(state):
            raise RuntimeError("boom")

        s.add_listener(broken)
        s.add_listener(recorder)
        await s.toggle()
        await asyncio.sleep(0.03)
        await s.toggle()
        assert any(state["ticks"] > 0 for state in published)
        assert published[-1]["status"] == s.engine.status.value
        await s.close()

    @pytest.mark.asyncio
    async def test_tick_error_publishes_paused_state(self):
        s = GameSession(GameConfig(base_tick_ms=5, min_tick_ms=1), seed=0)
        published = []

        async def recorder(state):
            published.append(state["status"])

        def broken_tick():
            raise RuntimeError("boom")

        s.add_listener(recorder)
        s.engine.tick = broken_tick
        await s.toggle()
        await asyncio.wait_for(s.scheduler.wait_stopped(), timeout=1.0)
        assert s.engine.status.value == "paused"
        assert published[-1] == s.engine.status.value
        await s.close()

    @pytest.mark.asyncio
    async def test_close_with_failing_store(self):
        class FailingStore(MemoryBestScoreStore):
            def save(self, score):
                raise OSError("disk full")

        s = GameSession(store=FailingStore(), seed=0)
        s.start()
        s.engine.best_score = 10
        await s.close()
        assert not s.scheduler.running

    @pytest.mark.asyncio
    async def test_close_awaits_tick_loop(self, session):
        await session.toggle()
        task = session.scheduler._task
        await session.close()
        assert task.done()
