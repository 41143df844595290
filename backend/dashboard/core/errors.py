"""Domain errors raised by the core services.

Routers translate these into HTTP responses; the services never raise
``HTTPException`` themselves.
"""


class DashboardError(Exception):
    """Base class for all domain errors."""


class ItemNotFoundError(DashboardError):
    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found")


class InvalidPreferenceError(DashboardError, ValueError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Invalid display preference {value!r}; expected one of: system, light, dark"
        )
