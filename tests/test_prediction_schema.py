# Area: Round Tests
"""Tests for prediction payload validation."""

import pytest

from tx_battle._round.prediction_schema import EMPTY_PREDICTION_ERROR, parse_prediction
from tx_battle.errors import InvalidPredictionError
from tx_battle.types import Prediction


class TestParsePrediction:
    """Tests for parse_prediction()."""

    def test_snake_case_payload(self):
        prediction = parse_prediction({"tx_count": 2000, "block_size": 1_500_000})
        assert prediction == Prediction(tx_count=2000, block_size=1_500_000)

    def test_camel_case_payload(self):
        prediction = parse_prediction({"txCount": "2500", "blockSize": "1600000"})
        assert prediction.tx_count == 2500
        assert prediction.block_size == 1_600_000

    def test_difficulty_parsed_as_float(self):
        prediction = parse_prediction({"difficulty": "55621444139429.57"})
        assert prediction.difficulty == pytest.approx(55621444139429.57)
        assert prediction.fields() == ["difficulty"]

    def test_blank_strings_are_not_predicted(self):
        prediction = parse_prediction({"txCount": "2000", "blockSize": "", "difficulty": "  "})
        assert prediction.fields() == ["tx_count"]

    def test_unknown_keys_ignored(self):
        prediction = parse_prediction({"tx_count": 10, "blockHeight": 800000})
        assert prediction.fields() == ["tx_count"]

    def test_empty_payload_rejected(self):
        with pytest.raises(InvalidPredictionError) as exc_info:
            parse_prediction({})
        assert exc_info.value.validation_errors == [EMPTY_PREDICTION_ERROR]

    def test_only_unknown_keys_rejected(self):
        with pytest.raises(InvalidPredictionError):
            parse_prediction({"fee_rate": 12})

    @pytest.mark.parametrize("payload", [
        {"tx_count": 0},
        {"tx_count": -5},
        {"block_size": "lots"},
        {"difficulty": -1.0},
        {"difficulty": "nan"},
        {"difficulty": "inf"},
    ])
    def test_bad_values_rejected(self, payload):
        with pytest.raises(InvalidPredictionError) as exc_info:
            parse_prediction(payload)
        assert exc_info.value.validation_errors
        assert exc_info.value.payload == payload

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidPredictionError):
            parse_prediction(["tx_count", 2000])


class TestPredictionRecord:
    """Tests for the Prediction dataclass itself."""

    def test_non_positive_value_raises(self):
        with pytest.raises(InvalidPredictionError):
            Prediction(block_size=0)

    @pytest.mark.parametrize("kwargs,message", [
        ({"difficulty": float("nan")}, "difficulty must be finite"),
        ({"difficulty": float("inf")}, "difficulty must be finite"),
        ({"tx_count": True}, "tx_count must be a number"),
        ({"tx_count": "2000"}, "tx_count must be a number"),
    ])
    def test_non_numeric_or_non_finite_value_raises(self, kwargs, message):
        with pytest.raises(InvalidPredictionError) as exc_info:
            Prediction(**kwargs)
        assert exc_info.value.validation_errors[0].startswith(message)

    def test_every_bad_field_reported(self):
        with pytest.raises(InvalidPredictionError) as exc_info:
            Prediction(tx_count=-1, block_size="big", difficulty=float("nan"))
        assert len(exc_info.value.validation_errors) == 3

    def test_int_difficulty_accepted(self):
        assert Prediction(difficulty=55_621_444_139_429).fields() == ["difficulty"]

    def test_empty_prediction_constructs_but_is_empty(self):
        assert Prediction().is_empty() is True

    def test_as_dict_includes_all_fields(self):
        assert Prediction(tx_count=1).as_dict() == {
            "tx_count": 1, "block_size": None, "difficulty": None,
        }

    def test_error_log_names_operation(self):
        with pytest.raises(InvalidPredictionError) as exc_info:
            parse_prediction({})
        block = exc_info.value.format_error_log()
        assert "INVALID_PREDICTION" in block
        assert "submit_prediction" in block
