"""Error kinds raised across the dashboard core.

None of these is fatal: callers translate them into a user-facing notice
(or a log line) and keep the last valid state.
"""


class DashboardError(Exception):
    """Base class for all dashboard errors."""


class NetworkError(DashboardError):
    """Primary forecast fetch failed (transport error or non-2xx status)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SecondaryFetchError(DashboardError):
    """Air-quality fetch failed. Logged only."""


class ComparisonFetchError(DashboardError):
    """At least one comparison city failed; the whole batch is discarded."""


class CapacityError(DashboardError):
    """Comparison set is already full."""

    def __init__(self, capacity: int):
        super().__init__(f"You can only compare up to {capacity} cities at once.")
        self.capacity = capacity


class ExportError(DashboardError):
    """Writing or sharing an export payload failed."""


class StorageError(DashboardError):
    """Reading or writing persisted state failed."""
