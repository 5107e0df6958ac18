"""Builds health snapshots from the data-store connection state."""

from datetime import datetime, timezone

from gateway_common import setup_logging

from interfaces import DataStore

from .models import HealthSnapshot

logger = setup_logging()


class HealthReporter:
    """
    Reports process health as a fresh snapshot on every call.

    ``ok`` mirrors store connectivity. The reporter never raises: a store whose
    state cannot be read is reported as down.
    """

    def __init__(self, store: DataStore):
        self._store = store

    def snapshot(self) -> HealthSnapshot:
        try:
            connected = bool(self._store.is_connected())
        except Exception:
            logger.warning("Could not read data store state", exc_info=True)
            connected = False

        return HealthSnapshot(
            ok=connected,
            store="up" if connected else "down",
            ts=datetime.now(timezone.utc),
        )
