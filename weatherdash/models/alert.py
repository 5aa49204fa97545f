"""Weather alert models."""

from dataclasses import dataclass
from enum import StrEnum


class AlertType(StrEnum):
    HEAT = "heat"
    COLD = "cold"
    WIND = "wind"


class Severity(StrEnum):
    HIGH = "high"
    MODERATE = "moderate"


@dataclass(frozen=True)
class Alert:
    type: AlertType
    message: str
    severity: Severity
