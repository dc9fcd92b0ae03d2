import pytest

from models.schemas.scored_candidate import FactorName
from services.weights import DEFAULT_WEIGHTS, FactorWeightTable


def test_default_weights_sum_to_one():
    assert sum(DEFAULT_WEIGHTS.values()) == pytest.approx(1.0)
    assert DEFAULT_WEIGHTS.validate() is DEFAULT_WEIGHTS


def test_default_weights_order_and_values():
    assert list(DEFAULT_WEIGHTS)[:3] == [FactorName.TITLE, FactorName.SKILLS, FactorName.LOCATION]
    assert DEFAULT_WEIGHTS[FactorName.TITLE] == 0.18
    assert DEFAULT_WEIGHTS[FactorName.RECENCY] == 0.01


def test_extras_are_not_weighted():
    assert FactorName.POPULARITY not in DEFAULT_WEIGHTS
    assert FactorName.CAREER_PROGRESSION not in DEFAULT_WEIGHTS


def test_rejects_bad_sum():
    table = FactorWeightTable({FactorName.TITLE: 0.5, FactorName.SKILLS: 0.4})
    with pytest.raises(ValueError, match="sum to 1.0"):
        table.validate()


def test_rejects_unknown_factor():
    table = FactorWeightTable({"title": 1.0})
    with pytest.raises(ValueError, match="Unknown factor"):
        table.validate()


def test_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_WEIGHTS[FactorName.TITLE] = 1.0


def test_as_dict_uses_factor_names():
    assert DEFAULT_WEIGHTS.as_dict()["work_mode"] == 0.04
