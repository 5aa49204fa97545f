"""Tests for the pure state update functions."""

import pytest

from weatherdash.models.alert import Alert, AlertType, Severity
from weatherdash.models.weather import AirQualitySnapshot
from weatherdash.state import app_state
from weatherdash.state.app_state import AppState
from weatherdash.tests.helpers import BERLIN, PARIS


class TestSelection:
    def test_select_city_returns_new_state(self):
        state = AppState()
        new = app_state.select_city(state, BERLIN)
        assert new.selected_city == BERLIN
        assert state.selected_city is None

    def test_switching_city_drops_air_quality(self):
        state = AppState(selected_city=BERLIN, air_quality=AirQualitySnapshot(40, 20))
        assert app_state.select_city(state, PARIS).air_quality is None
        assert app_state.select_city(state, BERLIN).air_quality is not None

    def test_time_range_validated(self):
        assert app_state.set_time_range(AppState(), 168).time_range == 168
        with pytest.raises(ValueError):
            app_state.set_time_range(AppState(), 100)

    def test_toggle_variable(self):
        state = AppState(selected_variables=("temperature_2m",))
        state = app_state.toggle_variable(state, "windspeed_10m")
        assert state.selected_variables == ("temperature_2m", "windspeed_10m")
        state = app_state.toggle_variable(state, "temperature_2m")
        assert state.selected_variables == ("windspeed_10m",)

    def test_toggle_unknown_variable(self):
        with pytest.raises(ValueError):
            app_state.toggle_variable(AppState(), "snow_depth")


class TestKeys:
    def test_fetch_key(self):
        assert AppState().fetch_key() is None
        assert AppState(selected_city=BERLIN, time_range=48).fetch_key() == ("Berlin", 48)

    def test_units_do_not_change_comparison_key(self):
        state = AppState()
        assert app_state.set_units(state, False).comparison_key() == state.comparison_key()

    def test_variables_change_comparison_key(self):
        state = AppState()
        changed = app_state.toggle_variable(state, "windspeed_10m")
        assert changed.comparison_key() != state.comparison_key()


class TestFetchResults:
    def test_error_keeps_previous_snapshot(self, snapshot_24h):
        alert = Alert(AlertType.HEAT, "Extreme heat warning", Severity.HIGH)
        state = AppState(weather=snapshot_24h, alerts=(alert,), loading=True)
        failed = app_state.apply_weather_error(state, "HTTP 500")
        assert failed.weather is snapshot_24h
        assert failed.alerts == (alert,)
        assert failed.loading is False
        assert failed.error == "HTTP 500"

    def test_success_replaces_alerts_and_clears_error(self, snapshot_24h):
        state = AppState(error="old", loading=True)
        ok = app_state.apply_weather(state, snapshot_24h, [])
        assert ok.weather is snapshot_24h
        assert ok.alerts == ()
        assert ok.error is None
        assert ok.loading is False
