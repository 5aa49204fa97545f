"""Threshold alerts from current conditions."""

from weatherdash.config.schema import AlertThresholds
from weatherdash.models.alert import Alert, AlertType, Severity
from weatherdash.models.weather import CurrentConditions

DEFAULT_THRESHOLDS = AlertThresholds()


def evaluate_alerts(
    current: CurrentConditions | None,
    thresholds: AlertThresholds = DEFAULT_THRESHOLDS,
) -> list[Alert]:
    """Evaluate alerts against metric readings.

    Heat and cold are mutually exclusive; wind is checked independently.
    A missing reading raises nothing for its category.
    """
    alerts: list[Alert] = []
    if current is None:
        return alerts

    temp = current.temperature
    if temp is not None and temp > thresholds.heat_c:
        alerts.append(Alert(AlertType.HEAT, "Extreme heat warning", Severity.HIGH))
    elif temp is not None and temp < thresholds.cold_c:
        alerts.append(Alert(AlertType.COLD, "Extreme cold warning", Severity.HIGH))

    wind = current.windspeed
    if wind is not None and wind > thresholds.wind_kph:
        alerts.append(Alert(AlertType.WIND, "High wind warning", Severity.MODERATE))

    return alerts
