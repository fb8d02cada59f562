"""
Result schema tests

Documented examples must carry exactly the model's wire fields.
"""

import pytest

from ..schemas import (
    AddPositionResult,
    InitPriceResult,
    PositionTokenEstimate,
    PriceResult,
    TokenAmount,
)


def wire_names(model):
    return {field.serialization_alias or name for name, field in model.model_fields.items()}


def example(model):
    return model.model_config["json_schema_extra"]["example"]


class TestExamples:
    """json_schema_extra examples"""

    @pytest.mark.parametrize("model", [TokenAmount, AddPositionResult, InitPriceResult, PriceResult])
    def test_keys_match_fields(self, model):
        assert set(example(model)) == wire_names(model)

    @pytest.mark.parametrize("side", ["token0", "token1"])
    def test_position_sides(self, side):
        assert set(example(AddPositionResult)[side]) == wire_names(PositionTokenEstimate)
