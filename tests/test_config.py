"""Tests for ContextVar-based buffer configuration.

Validates defaults, context manager behavior and thread isolation.
"""

from threading import Thread

import pytest

from chesscli import (
    StrBuf,
    StrConfig,
    get_str_config,
    reset_str_config,
    set_str_config,
    str_config_context,
)
from chesscli.errors import AllocationError


class TestStrConfigDataclass:
    """StrConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = StrConfig()
        assert config.debug_checks is True
        assert config.max_capacity is None

    def test_immutability(self) -> None:
        config = StrConfig()
        with pytest.raises(AttributeError):
            config.debug_checks = False  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = StrConfig.from_dict({"max_capacity": 64, "unknown_key": 1})
        assert config.max_capacity == 64
        assert config.debug_checks is True

    def test_from_dict_empty(self) -> None:
        assert StrConfig.from_dict({}) == StrConfig()


class TestContextVarFunctions:
    """get/set/reset functions."""

    def test_get_default(self) -> None:
        assert get_str_config() == StrConfig()

    def test_set_and_reset(self) -> None:
        try:
            set_str_config(StrConfig(debug_checks=False))
            assert get_str_config().debug_checks is False
        finally:
            reset_str_config()
        assert get_str_config().debug_checks is True


class TestStrConfigContext:
    """str_config_context() context manager."""

    def test_applies_and_restores(self) -> None:
        with str_config_context(StrConfig(max_capacity=128)):
            assert get_str_config().max_capacity == 128
        assert get_str_config().max_capacity is None

    def test_nested(self) -> None:
        with str_config_context(StrConfig(max_capacity=128)):
            with str_config_context(StrConfig(max_capacity=64)):
                assert get_str_config().max_capacity == 64
            assert get_str_config().max_capacity == 128

    def test_restores_on_exception(self) -> None:
        with pytest.raises(AllocationError):
            with str_config_context(StrConfig(max_capacity=16)):
                StrBuf(b"x" * 100)
        assert get_str_config().max_capacity is None


class TestThreadIsolation:
    """Each thread sees its own config."""

    def test_thread_isolation(self) -> None:
        results: dict[int, bool] = {}

        def worker(thread_id: int, limit: int | None) -> None:
            set_str_config(StrConfig(max_capacity=limit))
            try:
                StrBuf(b"x" * 100)
                results[thread_id] = True
            except AllocationError:
                results[thread_id] = False

        limits = [None, 32, 256, 64]
        threads = [Thread(target=worker, args=(i, limit)) for i, limit in enumerate(limits)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: True, 1: False, 2: True, 3: False}
        assert get_str_config().max_capacity is None
