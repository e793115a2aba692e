import copy
from importlib.resources import files

import pytest
from jsonschema import Draft202012Validator, validate

from minpaku_engine.engine.config import (
    DEFAULT_ENGINE_PATH,
    SCHEMA_PATH,
    load_engine_config,
    load_parameters,
    load_schema,
    parameters_from_engine,
    validate_engine_config,
)
from minpaku_engine.engine.errors import ConfigError

SCHEMA = load_schema()
ENGINE = load_engine_config()


def test_engine_schema_validates():
    Draft202012Validator.check_schema(SCHEMA)
    validate(instance=ENGINE, schema=SCHEMA)
    validate_engine_config(ENGINE)


@pytest.mark.parametrize("mutate", [
    lambda e: e["seasons"]["High"].__setitem__("avgStayLengthNights", 0),
    lambda e: e["constants"]["operations"].__setitem__("regularOccupancyPct", 120),
    lambda e: e["constants"]["fixedCosts"].__setitem__("monthlyRent", -1),
    lambda e: e["calendar"]["monthlySeasons"].pop(),
    lambda e: e["calendar"]["monthlySeasons"].__setitem__(0, "Peak"),
    lambda e: e["seasons"].__setitem__("Regular", {"adrMultiplier": 1, "occupancyAdjustmentPct": 0,
                                                    "avgStayLengthNights": 1}),
])
def test_invalid_scenarios_rejected(mutate):
    e = copy.deepcopy(ENGINE)
    mutate(e)
    with pytest.raises(ConfigError):
        validate_engine_config(e)


def test_parameters_from_engine():
    base, profiles, assignment = parameters_from_engine(ENGINE)
    assert base.initial_investment == 3_000_000
    assert base.regular_adr == 15_000
    assert base.management_fee_rate_pct == 0
    assert profiles.high.adr_multiplier == 1.3
    assert profiles.low.occupancy_adjustment_pct == -15
    assert profiles.semi_high.avg_stay_length_nights == 2.5
    assert len(assignment) == 12


def test_missing_file_is_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_engine_config(tmp_path / "nope.json")


def test_bad_json_is_config_error(tmp_path):
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_engine_config(p)


def test_defaults_resolve_inside_the_package():
    for p in (DEFAULT_ENGINE_PATH, SCHEMA_PATH):
        assert p.is_file()
        assert (p.parent.name, p.parent.parent.name) == ("data", "minpaku_engine")
        assert files("minpaku_engine.data").joinpath(p.name).is_file()
    base, _, assignment = load_parameters()
    assert base.regular_adr == 15_000
    assert len(assignment) == 12


def test_missing_schema_is_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_schema(tmp_path / "nope.json")
    with pytest.raises(ConfigError):
        load_parameters(schema_path=tmp_path / "nope.json")


def test_bad_schema_json_is_config_error(tmp_path):
    p = tmp_path / "schema.json"
    p.write_text("[", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_schema(p)
