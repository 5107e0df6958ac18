"""SQLModel-backed implementation of the DataStore interface."""

from gateway_common import setup_logging
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlmodel import create_engine

from exceptions import StoreConnectionError
from interfaces import DataStore

logger = setup_logging()


class SQLDataStore(DataStore):
    """
    Tracks the connectivity of a SQL database.

    The connection state is a flag. ``ping`` refreshes it with a round trip,
    engine events keep it current between pings, and ``is_connected`` only
    reads it.
    """

    def __init__(self, engine: Engine):
        self._engine = engine
        self._connected = False
        event.listen(engine, "handle_error", self._on_error)

    @classmethod
    def from_url(cls, url: str) -> "SQLDataStore":
        return cls(create_engine(url, pool_pre_ping=True))

    def _set_connected(self, connected: bool) -> None:
        if connected and not self._connected:
            logger.info("Data store connected", extra={"dialect": self._engine.dialect.name})
        elif not connected and self._connected:
            logger.warning(
                "Data store disconnected", extra={"dialect": self._engine.dialect.name}
            )
        self._connected = connected

    def _on_error(self, context) -> None:
        if context.is_disconnect:
            self._set_connected(False)

    def _round_trip(self) -> None:
        with self._engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def connect(self) -> None:
        try:
            self._round_trip()
        except Exception as e:
            self._set_connected(False)
            logger.exception(
                "Data store connection failed",
                extra={"dialect": self._engine.dialect.name},
            )
            raise StoreConnectionError(str(self._engine.url), e) from e
        self._set_connected(True)

    def ping(self) -> bool:
        try:
            self._round_trip()
        except Exception:
            self._set_connected(False)
        else:
            self._set_connected(True)
        return self._connected

    def is_connected(self) -> bool:
        return self._connected

    def close(self) -> None:
        self._engine.dispose()
        self._connected = False
