"""Tests for ``Splatter.transform`` interpolation on dict records."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any

import pytest
from pytest_mock import MockerFixture

from splatfmt.config.options import SplatOptions
from splatfmt.features.interpolation.domain.formatter import format_message
from splatfmt.features.interpolation.usecases.splatter import Splatter, splat
from splatfmt.shared.symbols import SPLAT

_SPLATTER_MODULE = "splatfmt.features.interpolation.usecases.splatter"


@pytest.fixture
def splatter() -> Splatter:
    return splat()


class TestTransform:
    """Core interpolation behavior."""

    def test_record_without_tokens_or_splat_is_untouched(
        self, splatter: Splatter, mocker: MockerFixture
    ) -> None:
        """Identity short-circuit: same object, same content, formatter not called."""
        formatter = mocker.patch(f"{_SPLATTER_MODULE}.format_message", wraps=format_message)
        record: dict[Any, Any] = {"level": "info", "message": "hello world"}
        snapshot = dict(record)

        result = splatter.transform(record)

        assert result is record
        assert record == snapshot
        formatter.assert_not_called()

    def test_substitutes_string_and_number(self, splatter: Splatter) -> None:
        args = ["x", 5]
        record: dict[Any, Any] = {"message": "%s is %d", SPLAT: args}

        result = splatter.transform(record)

        assert result is record
        assert record["message"] == "x is 5"
        assert record[SPLAT] is args
        assert args == []

    def test_escaped_percent_consumes_nothing(self, splatter: Splatter) -> None:
        record: dict[Any, Any] = {"message": "100%% done", SPLAT: ["ignored"]}

        _ = splatter.transform(record)

        assert record["message"] == "100% done"
        assert record[SPLAT] == ["ignored"]

    def test_fewer_arguments_than_tokens(self, splatter: Splatter) -> None:
        record: dict[Any, Any] = {"message": "%s and %s", SPLAT: ["a"]}

        _ = splatter.transform(record)

        assert record["message"] == "a and %s"
        assert record[SPLAT] == []

    def test_only_expected_arguments_are_consumed(self, splatter: Splatter) -> None:
        record: dict[Any, Any] = {"message": "%s", SPLAT: ["a", "b", "c"]}

        _ = splatter.transform(record)

        assert record["message"] == "a"
        assert record[SPLAT] == ["b", "c"]

    def test_second_pass_is_a_no_op(
        self, splatter: Splatter, mocker: MockerFixture
    ) -> None:
        record: dict[Any, Any] = {"message": "%s is %d", SPLAT: ["x", 5]}
        _ = splatter.transform(record)
        snapshot = dict(record)
        formatter = mocker.patch(f"{_SPLATTER_MODULE}.format_message", wraps=format_message)

        result = splatter.transform(record)

        assert result is record
        assert record == snapshot
        formatter.assert_not_called()

    def test_tokens_without_splat_still_unescape(self, splatter: Splatter) -> None:
        record: dict[Any, Any] = {"message": "%s at 50%%"}

        _ = splatter.transform(record)

        assert record["message"] == "%s at 50%"
        assert SPLAT not in record

    def test_formatter_receives_consumed_arguments(
        self, splatter: Splatter, mocker: MockerFixture
    ) -> None:
        formatter = mocker.patch(f"{_SPLATTER_MODULE}.format_message", wraps=format_message)
        record: dict[Any, Any] = {"message": "%s-%j", SPLAT: ["a", {"k": 1}, "rest"]}

        _ = splatter.transform(record)

        formatter.assert_called_once_with("%s-%j", "a", {"k": 1})
        assert record["message"] == 'a-{"k":1}'
        assert record[SPLAT] == ["rest"]


class TestSplatSources:
    """Resolution of the symbol and plain-name argument channels."""

    def test_plain_splat_field(self, splatter: Splatter) -> None:
        record: dict[Any, Any] = {"message": "%s!", "splat": ["hi", "there"]}

        _ = splatter.transform(record)

        assert record["message"] == "hi!"
        assert record["splat"] == ["there"]

    def test_symbol_channel_wins_over_plain_field(self, splatter: Splatter) -> None:
        record: dict[Any, Any] = {"message": "%s", SPLAT: ["sym"], "splat": ["plain"]}

        _ = splatter.transform(record)

        assert record["message"] == "sym"
        assert record[SPLAT] == []
        assert record["splat"] == ["plain"]

    def test_empty_symbol_channel_falls_through(self, splatter: Splatter) -> None:
        record: dict[Any, Any] = {"message": "%s", SPLAT: [], "splat": ["plain"]}

        _ = splatter.transform(record)

        assert record["message"] == "plain"
        assert record[SPLAT] == []
        assert record["splat"] == []

    def test_immutable_splat_is_replaced_with_remainder(self, splatter: Splatter) -> None:
        record: dict[Any, Any] = {"message": "%s", SPLAT: ("a", "b")}

        _ = splatter.transform(record)

        assert record["message"] == "a"
        assert record[SPLAT] == ["b"]

    def test_deque_splat_is_shrunk_in_place(self, splatter: Splatter) -> None:
        """Mutable sequences without slice support lose their consumed prefix."""
        args = deque(["a", "b", "c"])
        record: dict[Any, Any] = {"message": "%s-%s", SPLAT: args}

        _ = splatter.transform(record)

        assert record["message"] == "a-b"
        assert record[SPLAT] is args
        assert list(args) == ["c"]

    def test_splat_without_tokens_is_left_for_later_stages(
        self, splatter: Splatter
    ) -> None:
        args = ["kept"]
        record: dict[Any, Any] = {"message": "no tokens here", SPLAT: args}

        result = splatter.transform(record)

        assert result is record
        assert record["message"] == "no tokens here"
        assert record[SPLAT] is args
        assert args == ["kept"]

    @pytest.mark.parametrize("message", [None, 42, ["%s"]])
    def test_non_string_message_is_untouched(
        self, splatter: Splatter, message: Any
    ) -> None:
        record: dict[Any, Any] = {"message": message, SPLAT: ["a"]}

        _ = splatter.transform(record)

        assert record["message"] == message
        assert record[SPLAT] == ["a"]

    def test_missing_message_is_untouched(self, splatter: Splatter) -> None:
        record: dict[Any, Any] = {SPLAT: ["a"]}

        _ = splatter.transform(record)

        assert record == {SPLAT: ["a"]}


class TestConstruction:
    def test_factory_returns_fresh_instances(self) -> None:
        first = splat({"any": "value"})
        second = splat()

        assert first is not second
        assert first.options.get("any") == "value"
        assert isinstance(second.options, SplatOptions)

    def test_options_do_not_change_behavior(self) -> None:
        record: dict[Any, Any] = {"message": "%s", SPLAT: ["a"]}

        _ = Splatter({"unknown": True}).transform(record)

        assert record["message"] == "a"

    def test_invalid_options_rejected(self) -> None:
        with pytest.raises(TypeError):
            _ = Splatter("nope")  # pyright: ignore[reportArgumentType]

    def test_instances_are_callable(self, splatter: Splatter) -> None:
        record: dict[Any, Any] = {"message": "%d%%", SPLAT: [99]}

        assert splatter(record) is record
        assert record["message"] == "99%"


class TestDiagnostics:
    def test_applied_event_logged(
        self, splatter: Splatter, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="splatfmt")
        record: dict[Any, Any] = {"message": "%s %s", SPLAT: ["a", "b", "c"]}

        _ = splatter.transform(record)

        applied = [
            entry
            for entry in caplog.records
            if getattr(entry, "interpolation_event", None) == "interpolation.applied"
        ]
        assert len(applied) == 1
        assert getattr(applied[0], "tokens") == 2
        assert getattr(applied[0], "consumed") == 2
        assert getattr(applied[0], "remaining") == 1

    def test_passthrough_event_logged(
        self, splatter: Splatter, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="splatfmt")

        _ = splatter.transform({"message": "plain", SPLAT: ["x"]})

        events = [getattr(entry, "interpolation_event", None) for entry in caplog.records]
        assert events == ["interpolation.passthrough"]

    def test_identity_path_logs_nothing(
        self, splatter: Splatter, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="splatfmt")

        _ = splatter.transform({"message": "plain"})

        assert caplog.records == []
