"""Gate operation flow and error rendering."""

from __future__ import annotations

import pytest
from web3.exceptions import ContractLogicError

from smartgate.chain.client import SmartGateClient
from smartgate.chain.errors import (
    MissingEventError,
    NodeConnectionError,
    format_readable_error,
)
from smartgate.chain.operations import perform_gate_operation
from smartgate.ui.trend import SERIES_ORDER, build_trend_figure
from smartgate.utils.history import HistoryStore
from conftest import GATE_ADDRESS, RecordingClient, gate_log


class TestPerformGateOperation:
    def test_success_returns_result_record(self, fake_w3):
        fake_w3.eth.function_receipts["gateOperation"] = {"logs": [gate_log([20, 10, 30, 66, 20, 8, 29])]}
        client = SmartGateClient("http://node", GATE_ADDRESS, abi=[], web3=fake_w3)

        result = perform_gate_operation(lambda: client, "10, 20, 30", 1, False)

        assert result == {
            "avg": 20,
            "minVal": 10,
            "maxVal": 30,
            "variance": 66,
            "median": 20,
            "standardDeviation": 8,
            "percentile": 29,
        }

    def test_parsed_numbers_are_forwarded(self):
        client = RecordingClient(MissingEventError("No GateOperationResult event found."))

        perform_gate_operation(lambda: client, "1, x, 2", 3, True)

        assert client.calls == [([1, 2], 3, True)]

    @pytest.mark.parametrize("text", ["", " , ", "abc"])
    def test_empty_dataset(self, text):
        client = RecordingClient(None)

        result = perform_gate_operation(lambda: client, text, 1, False)

        assert result == {"error": "Please enter at least one numeric value."}
        assert client.calls == []

    def test_missing_event(self):
        client = RecordingClient(MissingEventError("No GateOperationResult event found."))

        assert perform_gate_operation(lambda: client, "1", 1, False) == {
            "error": "No GateOperationResult event found."
        }

    def test_client_construction_failure_is_reported(self):
        def factory():
            raise NodeConnectionError("Cannot connect to the JSON-RPC node at http://x")

        result = perform_gate_operation(factory, "1", 1, False)

        assert result == {"error": "Cannot connect to the JSON-RPC node at http://x"}

    def test_revert_reason_is_surfaced(self):
        client = RecordingClient(ContractLogicError("execution reverted: dataset too large"))

        assert perform_gate_operation(lambda: client, "1", 1, False) == {"error": "dataset too large"}


class TestFormatReadableError:
    def test_none_and_strings(self):
        assert format_readable_error(None) == "Unknown error"
        assert format_readable_error("boom") == "boom"

    def test_revert_without_prefix(self):
        assert format_readable_error(ContractLogicError("custom failure")) == "custom failure"

    def test_reason_attribute_wins_over_message(self):
        err = RuntimeError("outer")
        err.reason = "inner reason"
        err.message = "message"

        assert format_readable_error(err) == "inner reason"

    def test_message_attribute(self):
        err = RuntimeError("outer")
        err.message = "short message"

        assert format_readable_error(err) == "short message"

    def test_json_rpc_error_payload(self):
        err = ValueError({"code": -32000, "message": "insufficient funds"})

        assert format_readable_error(err) == "insufficient funds"

    def test_plain_exception(self):
        assert format_readable_error(KeyError("x")) == "'x'"

    def test_exception_without_text(self):
        assert format_readable_error(RuntimeError()) == '"RuntimeError()"'


class TestTrendFigure:
    def test_one_line_per_statistic_in_legend_order(self):
        history = HistoryStore()
        history.append({"avg": 1, "minVal": 0, "maxVal": 2, "variance": 1,
                        "median": 1, "standardDeviation": 1, "percentile": 2})
        history.append({"avg": 3, "minVal": 1, "maxVal": 5, "variance": 4,
                        "median": 3, "standardDeviation": 2, "percentile": 5})

        fig = build_trend_figure(history, dark=False)

        assert [trace.name for trace in fig.data] == SERIES_ORDER
        assert list(fig.data[0].x) == [1, 2]
        assert list(fig.data[0].y) == [1, 3]
        assert fig.data[1].line.color == "#2ecc71"

    def test_empty_history_still_builds(self):
        fig = build_trend_figure(HistoryStore(), dark=True)

        assert len(fig.data) == 7
