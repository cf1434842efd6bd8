"""
Tests for share_set JSON Schema contract and Pydantic models

Комплексное тестирование:
- Валидность самой схемы
- Валидация правильных записей (канонические фикстуры)
- Детекция нарушений required полей и типов
- Разбор в ShareSet и декодирование точек
- Immutability (frozen=True)
"""

import json

import pytest
from jsonschema import SchemaError
from pydantic import ValidationError

from src.core.contracts import (
    SchemaLoader,
    ShareSetContractError,
    ShareSetValidator,
    default_validator,
    validate_share_set,
)
from src.core.domain import Point, ShareEntry, ShareSet, ShareSetKeys
from src.core.math.base_decoding import InvalidBase, InvalidDigit
from src.interpolation.consensus import RobustConsensusSelector
from src.solver.fixtures import TESTCASE_1, TESTCASE_2


@pytest.fixture
def valid_record():
    """Валидная запись с пропущенной позицией 4."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "5": {"base": "16", "value": "1C"},
    }


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchema:
    """Сама схема и загрузчик."""

    def test_schema_loads(self):
        schema = SchemaLoader().load_schema("share_set")
        assert schema["title"] == "Share set"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("share_set") is loader.load_schema("share_set")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_custom_schema_dir(self, tmp_path):
        (tmp_path / "share_set.json").write_text(json.dumps({"type": "object"}))
        validator = ShareSetValidator(SchemaLoader(tmp_path))

        assert validator.is_valid({"anything": 1})
        assert not validator.is_valid([])

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}))
        with pytest.raises(SchemaError):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_default_validator_shared(self):
        assert default_validator() is default_validator()


# =============================================================================
# CONTRACT VALIDATION
# =============================================================================


class TestContractValidation:
    """Валидация сырых записей."""

    @pytest.mark.parametrize("record", [TESTCASE_1, TESTCASE_2])
    def test_fixtures_valid(self, record):
        validate_share_set(record)
        assert ShareSetValidator().is_valid(record)

    def test_valid_record(self, valid_record):
        validate_share_set(valid_record)

    def test_missing_keys(self, valid_record):
        del valid_record["keys"]
        with pytest.raises(ShareSetContractError, match="keys"):
            validate_share_set(valid_record)

    def test_missing_k(self, valid_record):
        del valid_record["keys"]["k"]
        with pytest.raises(ShareSetContractError, match="keys"):
            validate_share_set(valid_record)

    def test_numeric_base_rejected(self, valid_record):
        valid_record["1"]["base"] = 10
        with pytest.raises(ShareSetContractError, match="1/base"):
            validate_share_set(valid_record)

    def test_empty_value_rejected(self, valid_record):
        valid_record["2"]["value"] = ""
        with pytest.raises(ShareSetContractError):
            validate_share_set(valid_record)

    @pytest.mark.parametrize("key", ["0", "x", "01", "-1"])
    def test_bad_position_key_rejected(self, valid_record, key):
        valid_record[key] = {"base": "10", "value": "1"}
        with pytest.raises(ShareSetContractError):
            validate_share_set(valid_record)

    def test_non_object_rejected(self):
        with pytest.raises(ShareSetContractError, match="<root>"):
            validate_share_set([1, 2, 3])

    def test_errors_reports_all_sorted_by_path(self, valid_record):
        valid_record["2"]["value"] = 7
        valid_record["1"]["base"] = 10
        errors = ShareSetValidator().errors(valid_record)

        assert [e.location for e in errors] == ["1/base", "2/value"]
        assert all(isinstance(e, ShareSetContractError) for e in errors)

    def test_no_errors_for_valid_record(self, valid_record):
        assert ShareSetValidator().errors(valid_record) == []


# =============================================================================
# PYDANTIC MODELS
# =============================================================================


class TestShareSetModel:
    """ShareSet и декодирование точек."""

    def test_from_record(self, valid_record):
        share_set = ShareSet.from_record(valid_record)

        assert share_set.n == 4
        assert share_set.k == 3
        assert sorted(share_set.shares) == [1, 2, 3, 5]
        assert share_set.shares[2] == ShareEntry(base="2", value="111")

    def test_decode_points_sparse(self, valid_record):
        """Позиция 4 отсутствует, позиция 5 лежит за n=4."""
        points = ShareSet.from_record(valid_record).decode_points()

        assert [p.as_pair() for p in points] == [(1, 4), (2, 7), (3, 12)]

    def test_positions_above_n_ignored(self, caplog):
        record = {
            "keys": {"n": 3, "k": 3},
            "1": {"base": "10", "value": "4"},
            "2": {"base": "10", "value": "7"},
            "3": {"base": "10", "value": "12"},
            "9": {"base": "10", "value": "84"},
        }
        with caplog.at_level("WARNING"):
            points = ShareSet.from_record(record).decode_points()

        assert [p.position for p in points] == [1, 2, 3]
        assert "Ignoring share at position 9: above declared n=3" in caplog.text

    def test_positions_above_n_not_decoded(self, valid_record):
        valid_record["5"]["value"] = "zz"
        points = ShareSet.from_record(valid_record).decode_points()
        assert len(points) == 3

    def test_stray_entries_cannot_outvote_true_points(self):
        """Согласованные доли за n не участвуют в поиске консенсуса."""
        record = {
            "keys": {"n": 3, "k": 2},
            "1": {"base": "10", "value": "5"},
            "2": {"base": "10", "value": "7"},
            "3": {"base": "10", "value": "9"},
            "4": {"base": "10", "value": "100"},
            "5": {"base": "10", "value": "200"},
            "6": {"base": "10", "value": "300"},
            "7": {"base": "10", "value": "400"},
        }
        points = ShareSet.from_record(record).decode_points()
        result = RobustConsensusSelector().select(points, 2)

        assert result.constant_term == 3
        assert result.score == 3

    def test_decode_points_sorted_by_position(self):
        record = {
            "keys": {"n": 3, "k": 2},
            "3": {"base": "10", "value": "30"},
            "1": {"base": "10", "value": "10"},
            "2": {"base": "10", "value": "20"},
        }
        points = ShareSet.from_record(record).decode_points()
        assert [p.position for p in points] == [1, 2, 3]

    def test_testcase1_ignores_position_above_n(self, caplog):
        with caplog.at_level("WARNING"):
            points = ShareSet.from_record(TESTCASE_1).decode_points()

        assert [p.as_pair() for p in points] == [(1, 4), (2, 7), (3, 12)]
        assert "Ignoring share at position 6" in caplog.text
        assert "Declared n=4 but 3 shares present: positions [1, 2, 3]" in caplog.text

    def test_decoded_points_logged_at_info(self, valid_record, caplog):
        with caplog.at_level("INFO", logger="src.core.domain.share_set"):
            ShareSet.from_record(valid_record).decode_points()

        info = [r.getMessage() for r in caplog.records if r.levelname == "INFO"]
        assert "Point 2: (2, 7) - base 2, value 111" in info
        assert len(info) == 3

    def test_count_mismatch_logged(self, valid_record, caplog):
        valid_record["keys"]["n"] = 7
        with caplog.at_level("WARNING"):
            ShareSet.from_record(valid_record).decode_points()
        assert "Declared n=7 but 4 shares present" in caplog.text

    def test_round_trip_record(self):
        assert ShareSet.from_record(TESTCASE_2).to_record() == TESTCASE_2

    def test_invalid_base_on_decode(self, valid_record):
        valid_record["1"]["base"] = "37"
        with pytest.raises(InvalidBase):
            ShareSet.from_record(valid_record).decode_points()

    def test_invalid_digit_on_decode(self, valid_record):
        valid_record["2"]["value"] = "121"
        with pytest.raises(InvalidDigit):
            ShareSet.from_record(valid_record).decode_points()

    def test_missing_keys_model_error(self):
        with pytest.raises(ValidationError):
            ShareSet.from_record({"1": {"base": "10", "value": "1"}})

    def test_keys_constraints(self):
        with pytest.raises(ValidationError):
            ShareSetKeys(n=0, k=1)
        with pytest.raises(ValidationError):
            ShareSetKeys(n=1, k=0)

    def test_frozen(self, valid_record):
        share_set = ShareSet.from_record(valid_record)
        with pytest.raises(ValidationError):
            share_set.keys = ShareSetKeys(n=1, k=1)


class TestPointModel:
    """Point: позиция > 0, immutable."""

    def test_position_must_be_positive(self):
        with pytest.raises(ValidationError):
            Point(position=0, value=1)

    def test_big_value(self):
        point = Point(position=1, value=10**500)
        assert point.value == 10**500

    def test_frozen(self):
        point = Point(position=1, value=2)
        with pytest.raises(ValidationError):
            point.value = 3
