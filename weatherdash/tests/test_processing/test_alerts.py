"""Tests for threshold alert evaluation."""

from weatherdash.config.schema import AlertThresholds
from weatherdash.models.alert import AlertType, Severity
from weatherdash.models.weather import CurrentConditions
from weatherdash.processing.alerts import evaluate_alerts


def _current(temperature, windspeed) -> CurrentConditions:
    return CurrentConditions(temperature=temperature, windspeed=windspeed, winddirection=0)


class TestEvaluateAlerts:
    def test_heat_only(self):
        alerts = evaluate_alerts(_current(36, 10))
        assert len(alerts) == 1
        assert alerts[0].type == AlertType.HEAT
        assert alerts[0].severity == Severity.HIGH
        assert alerts[0].message == "Extreme heat warning"

    def test_heat_and_wind(self):
        alerts = evaluate_alerts(_current(36, 70))
        assert [a.type for a in alerts] == [AlertType.HEAT, AlertType.WIND]
        assert alerts[1].severity == Severity.MODERATE

    def test_calm_day(self):
        assert evaluate_alerts(_current(20, 20)) == []

    def test_cold(self):
        alerts = evaluate_alerts(_current(-11, 0))
        assert [a.type for a in alerts] == [AlertType.COLD]

    def test_thresholds_are_exclusive(self):
        assert evaluate_alerts(_current(35, 60)) == []
        assert evaluate_alerts(_current(-10, 60)) == []

    def test_cold_and_wind(self):
        alerts = evaluate_alerts(_current(-20, 80))
        assert [a.type for a in alerts] == [AlertType.COLD, AlertType.WIND]

    def test_missing_readings(self):
        assert evaluate_alerts(None) == []
        assert evaluate_alerts(_current(None, None)) == []

    def test_fresh_list_each_call(self):
        first = evaluate_alerts(_current(36, 10))
        second = evaluate_alerts(_current(20, 10))
        assert len(first) == 1
        assert second == []

    def test_custom_thresholds(self):
        alerts = evaluate_alerts(_current(31, 10), AlertThresholds(heat_c=30.0))
        assert [a.type for a in alerts] == [AlertType.HEAT]
