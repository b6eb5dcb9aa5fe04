"""
Unit tests for KeyValueDemo.

Uses a dict-backed RedisClient for happy paths and a MagicMock store
where a specific failure has to be injected.
"""

from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from core.constants import DemoStep
from core.errors import KeyNotFoundError, ReplyConversionError
from interfaces.key_value_store import IKeyValueStore
from models.schemas import User
from services.demo import KeyValueDemo, resolve_steps, step_names


class TestDemoSteps:
    """Each step on its own."""

    def test_ping(self, store):
        assert list(KeyValueDemo(store).ping()) == ["PING Response = PONG"]

    def test_set_stores_both_values(self, store, fake_redis):
        lines = list(KeyValueDemo(store).set())

        assert lines == []
        assert fake_redis.data["Favorite Movie"] == b"Repo Man"
        assert fake_redis.data["Release Year"] == b"1984"

    def test_get_after_set(self, store):
        demo = KeyValueDemo(store)
        list(demo.set())

        assert list(demo.get()) == [
            "Favorite Movie = Repo Man",
            "Release Year = 1984",
            "Nonexistent Key does not exist",
        ]

    def test_get_before_set_raises_absent(self, store):
        with pytest.raises(KeyNotFoundError):
            list(KeyValueDemo(store).get())

    def test_get_reports_nonexistent_key_if_present(self, store):
        demo = KeyValueDemo(store)
        list(demo.set())
        store.set("Nonexistent Key", "surprise")

        assert list(demo.get())[-1] == "Nonexistent Key = surprise"

    def test_set_struct(self, store):
        list(KeyValueDemo(store).set_struct())

        assert store.get_struct("12345") == User(
            is_pro=True, user_id="4", username="agnynureza", player_id=""
        )


class TestDemoRun:
    """Running several steps."""

    def test_run_all(self, store):
        lines = KeyValueDemo(store).run(["all"])

        assert lines == [
            "PING Response = PONG",
            "Favorite Movie = Repo Man",
            "Release Year = 1984",
            "Nonexistent Key does not exist",
        ]
        assert store.get_bytes("12345").startswith(b'{"ispro":true')

    def test_run_stops_at_first_error(self):
        mock_store = MagicMock(spec=IKeyValueStore)
        mock_store.ping.side_effect = RedisConnectionError("Connection refused")

        with pytest.raises(RedisConnectionError):
            KeyValueDemo(mock_store).run([DemoStep.PING, DemoStep.SET])

        mock_store.set.assert_not_called()

    def test_get_propagates_conversion_error(self):
        mock_store = MagicMock(spec=IKeyValueStore)
        mock_store.get_string.return_value = "Repo Man"
        mock_store.get_int.side_effect = ReplyConversionError(
            "Release Year", "int", "not an integer"
        )

        with pytest.raises(ReplyConversionError):
            list(KeyValueDemo(mock_store).get())

    def test_stream_yields_lines_before_failure(self):
        """Lines produced before a failing command are already delivered."""
        mock_store = MagicMock(spec=IKeyValueStore)
        mock_store.get_string.return_value = "Repo Man"
        mock_store.get_int.side_effect = ReplyConversionError(
            "Release Year", "int", "not an integer"
        )
        lines = KeyValueDemo(mock_store).stream(["get"])

        assert next(lines) == "Favorite Movie = Repo Man"
        mock_store.get_int.assert_not_called()

        with pytest.raises(ReplyConversionError):
            next(lines)


class TestResolveSteps:
    """Step name parsing."""

    def test_all_expands_in_order(self):
        assert resolve_steps(["all"]) == [
            DemoStep.PING,
            DemoStep.SET,
            DemoStep.GET,
            DemoStep.SET_STRUCT,
        ]

    def test_names_and_enums_accepted(self):
        assert resolve_steps(["set", DemoStep.GET]) == [DemoStep.SET, DemoStep.GET]

    def test_unknown_step(self):
        with pytest.raises(ValueError, match="Unknown step"):
            resolve_steps(["flush"])

    def test_step_names(self):
        assert step_names() == ["ping", "set", "get", "set-struct", "all"]
