"""Abstract interface for the backing data store."""

from abc import ABC, abstractmethod


class DataStore(ABC):
    """Abstract base class for data-store connections."""

    @abstractmethod
    def connect(self) -> None:
        """
        Opens the connection to the store.

        Raises:
            StoreConnectionError: If the store cannot be reached.
        """
        pass

    @abstractmethod
    def ping(self) -> bool:
        """
        Checks the store with a round trip and refreshes the connection state.

        Never raises; an unreachable store is recorded as disconnected.

        Returns:
            The refreshed connection state.
        """
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        """Returns the last known connection state without querying the store."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Releases pooled connections."""
        pass
