"""Tests for model.py: session ownership and recompute-on-demand."""
import dataclasses
import json
import logging
import os

import pytest

import pyoscp
from pyoscp import Model
from pyoscp.utils.debris.debris import DebrisScaling
from pyoscp.utils.params.params import DEFAULT_PARAMETERS
from pyoscp.utils.presets.presets import PRESETS
from pyoscp.utils.simulation.scen_metrics import ScenarioMetrics, recompute

_CONFIGURATIONS = os.path.join(os.path.dirname(pyoscp.__file__), "simulation_configurations")


class TestRecompute:
    def test_returns_type(self):
        assert isinstance(recompute(DEFAULT_PARAMETERS), ScenarioMetrics)

    def test_idempotent(self):
        assert recompute(DEFAULT_PARAMETERS) == recompute(DEFAULT_PARAMETERS)

    def test_reference_pipeline(self):
        metrics = recompute(DEFAULT_PARAMETERS)
        assert metrics.business.roi == pytest.approx(-0.1111, abs=1e-4)
        assert metrics.debris.collision_risk == pytest.approx(0.1533, abs=1e-4)
        assert metrics.debris.projected_debris_index == 10
        assert metrics.sustainability.score == pytest.approx(0.6636, abs=1e-4)
        assert metrics.sustainability.band == "yellow"


class TestModel:
    def test_starts_at_defaults(self):
        model = Model()
        assert model.parameters == DEFAULT_PARAMETERS
        assert model.version == 0
        assert model.metrics.parameters == DEFAULT_PARAMETERS

    def test_invalid_initial_parameters(self):
        with pytest.raises(ValueError):
            Model(dataclasses.replace(DEFAULT_PARAMETERS, satellite_count=0))

    def test_metrics_cached_until_mutation(self):
        model = Model()
        first = model.metrics
        assert model.metrics is first
        model.update(satellite_count=120)
        assert model.metrics is not first

    def test_update_recomputes_all_results(self):
        model = Model()
        before = model.metrics
        model.update(satellite_count=200, lifetime_years=15, eol_strategy="none")
        after = model.metrics
        assert after.version == model.version == 1
        assert after.parameters == model.parameters
        assert after.debris.collision_risk == pytest.approx(1.0)
        assert after.debris.projected_debris_index == 120
        assert after.business != before.business
        assert after.sustainability.band == "red"
        assert after == recompute(model.parameters, version=model.version)

    def test_metrics_match_current_snapshot(self):
        model = Model()
        for count in (10, 50, 150, 300):
            model.update(satellite_count=count)
            metrics = model.metrics
            assert metrics.parameters is model.parameters
            assert metrics.business == recompute(model.parameters).business
            assert metrics.debris == recompute(model.parameters).debris

    def test_unknown_field(self):
        model = Model()
        with pytest.raises(ValueError, match="hotel_class"):
            model.update(hotel_class="luxury")
        assert model.version == 0

    def test_invalid_update_leaves_session_unchanged(self):
        model = Model()
        metrics = model.metrics
        with pytest.raises(ValueError):
            model.update(satellite_count=20, mission_years=0)
        assert model.parameters == DEFAULT_PARAMETERS
        assert model.version == 0
        assert model.metrics is metrics

    @pytest.mark.parametrize("name", sorted(PRESETS))
    def test_apply_preset_replaces_every_field(self, name):
        model = Model()
        model.update(satellite_count=299, mission_years=14, expected_revenue_per_satellite=99.0,
                     cost_per_satellite=42.0, annual_opex_per_satellite=7.0, lifetime_years=13,
                     eol_strategy="none")
        model.apply_preset(name)
        assert model.parameters == PRESETS[name].parameters
        assert model.metrics.parameters == PRESETS[name].parameters

    def test_apply_lowcost(self):
        model = Model()
        params = model.apply_preset("lowcost")
        assert params.to_dict() == {
            "satellite_count": 80,
            "mission_years": 4,
            "expected_revenue_per_satellite": 6.0,
            "cost_per_satellite": 3.5,
            "annual_opex_per_satellite": 0.6,
            "lifetime_years": 5,
            "eol_strategy": "deorbit",
        }
        assert model.version == 1

    def test_unknown_preset_leaves_session_unchanged(self):
        model = Model()
        with pytest.raises(ValueError):
            model.apply_preset("budget")
        assert model.parameters == DEFAULT_PARAMETERS
        assert model.version == 0

    def test_apply_preset_logs(self, caplog):
        model = Model()
        with caplog.at_level(logging.INFO, logger="pyoscp.model"):
            model.apply_preset("luxury")
        assert any("luxury" in r.getMessage() for r in caplog.records)

    def test_reset(self):
        model = Model()
        model.apply_preset("luxury")
        assert model.reset() == DEFAULT_PARAMETERS
        assert model.version == 2
        assert model.metrics.version == 2

    def test_scaling_passed_to_debris(self):
        model = Model(scaling=DebrisScaling(ordem_factor=2.0, das_factor=1.0))
        assert model.metrics.debris.projected_debris_index == 20


class TestModelConfiguration:
    def test_default_configuration(self):
        model = Model.from_json(os.path.join(_CONFIGURATIONS, "default.json"))
        assert model.simulation_name == "default"
        assert model.parameters == DEFAULT_PARAMETERS

    def test_preset_with_override(self):
        model = Model.from_json(os.path.join(_CONFIGURATIONS, "research-extended.json"))
        assert model.parameters.lifetime_years == 10
        assert model.parameters.satellite_count == PRESETS["research"].parameters.satellite_count

    def test_invalid_configuration_value(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"mission_parameters": {"eol_strategy": "sunshade"}}))
        with pytest.raises(ValueError):
            Model.from_json(str(path))


class TestResultsToJson:
    def test_serialisable(self):
        model = Model()
        data = model.results_to_json()
        assert json.loads(json.dumps(data)) == data

    def test_content(self):
        model = Model(simulation_name="baseline")
        data = model.results_to_json()
        assert data["simulation_name"] == "baseline"
        assert data["version"] == 0
        assert data["parameters"] == DEFAULT_PARAMETERS.to_dict()
        assert data["business"]["tco"] == pytest.approx(540.0)
        assert data["business"]["roi_percent"] == -11
        assert data["views"]["cost_per_trip"] == pytest.approx(9.0)
        assert data["views"]["trip_duration_days"] == 15
        assert data["debris"]["projected_debris_index"] == 10
        assert data["sustainability"]["band"] == "yellow"
        assert list(data["views"]["risk_trend"]) == ["Y1", "Y2", "Y3", "Y4", "Y5"]


class TestModelGuards:
    def test_non_finite_update_rejected(self):
        model = Model()
        with pytest.raises(ValueError):
            model.update(annual_opex_per_satellite=float("inf"))
        assert model.parameters == DEFAULT_PARAMETERS
        assert 0.0 <= model.metrics.sustainability.score <= 1.0

    def test_nan_configuration_rejected(self, tmp_path):
        path = tmp_path / "nan.json"
        path.write_text('{"mission_parameters": {"cost_per_satellite": NaN}}')
        with pytest.raises(ValueError):
            Model.from_json(str(path))

    @pytest.mark.parametrize("content", [
        '{"mission_parameters": null}',
        '{"mission_parameters": [1, 2]}',
        '{"preset": ["lowcost"]}',
    ])
    def test_malformed_configuration_raises_value_error(self, tmp_path, content):
        path = tmp_path / "malformed.json"
        path.write_text(content)
        with pytest.raises(ValueError):
            Model.from_json(str(path))
