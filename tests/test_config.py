"""Tests for ContextVar-based transpile configuration.

Validates thread isolation, context manager behavior, and mapping coercion.
"""

import dataclasses
from threading import Thread

import pytest

from rs2ts import (
    ConfigError,
    RsEdition,
    Strategy,
    TranspileConfig,
    TsMajor,
    get_transpile_config,
    reset_transpile_config,
    set_transpile_config,
    transpile_config_context,
)


class TestTranspileConfigDataclass:
    """Test TranspileConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Default config targets the latest versions with Gungho."""
        config = TranspileConfig()
        assert config.rs_edition is RsEdition.LATEST
        assert config.ts_major is TsMajor.LATEST
        assert config.strategy is Strategy.GUNGHO
        assert config.strict is False

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = TranspileConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_replace(self) -> None:
        """dataclasses.replace() builds a modified copy."""
        config = TranspileConfig()
        cautious = dataclasses.replace(config, strategy=Strategy.CAUTIOUS)
        assert cautious.strategy is Strategy.CAUTIOUS
        assert config.strategy is Strategy.GUNGHO

    def test_str(self) -> None:
        assert str(TranspileConfig()) == "Latest Rust edition (2018), Latest TypeScript (4), Gungho"
        config = TranspileConfig(
            rs_edition=RsEdition.RS2015,
            ts_major=TsMajor.TS3,
            strategy=Strategy.CAUTIOUS,
        )
        assert str(config) == "Rust edition 2015, TypeScript 3, Cautious"

    def test_placeholders_in_check_order(self) -> None:
        config = TranspileConfig(
            rs_edition=RsEdition.RS2015,
            ts_major=TsMajor.TS3,
            strategy=Strategy.CAUTIOUS,
        )
        assert config.placeholders() == [RsEdition.RS2015, Strategy.CAUTIOUS, TsMajor.TS3]
        assert TranspileConfig(ts_major=TsMajor.TS4).placeholders() == []


class TestFromDict:
    """Test TranspileConfig.from_dict coercion."""

    def test_names_and_values(self) -> None:
        config = TranspileConfig.from_dict(
            {"rs_edition": "2018", "ts_major": "ts4", "strategy": "GUNGHO", "strict": True}
        )
        assert config == TranspileConfig(
            rs_edition=RsEdition.RS2018,
            ts_major=TsMajor.TS4,
            strategy=Strategy.GUNGHO,
            strict=True,
        )

    def test_members_pass_through(self) -> None:
        config = TranspileConfig.from_dict({"strategy": Strategy.CAUTIOUS})
        assert config.strategy is Strategy.CAUTIOUS

    def test_unknown_keys_ignored(self) -> None:
        assert TranspileConfig.from_dict({"emit_comments": False}) == TranspileConfig()

    def test_invalid_value(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            TranspileConfig.from_dict({"ts_major": "5"})
        assert exc_info.value.field_name == "ts_major"
        assert exc_info.value.value == "5"
        assert "LATEST, TS3, TS4" in str(exc_info.value)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("false", False),
            ("TRUE", True),
            (" off ", False),
            ("yes", True),
            ("0", False),
            (1, True),
            (False, False),
        ],
    )
    def test_strict_text_is_coerced(self, value: object, expected: bool) -> None:
        config = TranspileConfig.from_dict({"strict": value})
        assert config.strict is expected

    @pytest.mark.parametrize("value", ["maybe", "", 2, None, 0.5])
    def test_strict_rejects_non_booleans(self, value: object) -> None:
        with pytest.raises(ConfigError) as exc_info:
            TranspileConfig.from_dict({"strict": value})
        assert exc_info.value.field_name == "strict"
        assert exc_info.value.value == value


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_transpile_config()

    def test_default_config(self) -> None:
        """Default config is returned when not explicitly set."""
        assert get_transpile_config() == TranspileConfig()

    def test_set_and_get(self) -> None:
        """set_transpile_config() changes the current config."""
        custom_config = TranspileConfig(ts_major=TsMajor.TS4, strict=True)
        set_transpile_config(custom_config)
        assert get_transpile_config() is custom_config

    def test_reset(self) -> None:
        """reset_transpile_config() restores defaults."""
        set_transpile_config(TranspileConfig(strict=True))
        reset_transpile_config()
        assert get_transpile_config().strict is False


class TestContextManager:
    """Test transpile_config_context."""

    def teardown_method(self) -> None:
        reset_transpile_config()

    def test_restores_previous(self) -> None:
        outer = TranspileConfig(ts_major=TsMajor.TS4)
        set_transpile_config(outer)
        with transpile_config_context(TranspileConfig(strict=True)):
            assert get_transpile_config().strict is True
        assert get_transpile_config() is outer

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError), transpile_config_context(TranspileConfig(strict=True)):
            raise RuntimeError("boom")
        assert get_transpile_config().strict is False

    def test_nested(self) -> None:
        with transpile_config_context(TranspileConfig(ts_major=TsMajor.TS4)):
            with transpile_config_context(TranspileConfig(strict=True)):
                assert get_transpile_config().ts_major is TsMajor.LATEST
            assert get_transpile_config().ts_major is TsMajor.TS4


class TestThreadIsolation:
    """Each thread sees its own config."""

    def test_threads_do_not_share_config(self) -> None:
        results: dict[str, bool] = {}

        def worker(name: str, strict: bool) -> None:
            set_transpile_config(TranspileConfig(strict=strict))
            results[name] = get_transpile_config().strict

        threads = [
            Thread(target=worker, args=("strict", True)),
            Thread(target=worker, args=("lenient", False)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {"strict": True, "lenient": False}
        assert get_transpile_config().strict is False
