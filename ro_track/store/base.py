"""Storage capability shared by local and remote stores."""

from abc import ABC, abstractmethod
from typing import Callable

from ro_track.models import AppSettings, Customer

CustomerMutator = Callable[[list[Customer]], list[Customer]]


class CustomerStore(ABC):
    """Whole-document persistence for the customer list and settings.

    Writes always replace the full collection. ``update_customers`` is the
    read-modify-write entry point that must be atomic with respect to other
    writers of the same store.
    """

    @abstractmethod
    def load_customers(self) -> list[Customer]:
        """Return the full customer list with nested payments."""

    @abstractmethod
    def save_customers(self, customers: list[Customer]) -> None:
        """Replace the full customer list."""

    @abstractmethod
    def update_customers(self, mutator: CustomerMutator) -> list[Customer]:
        """Apply ``mutator`` to the current list and store its result."""

    @abstractmethod
    def load_settings(self) -> AppSettings:
        """Return the stored settings, or defaults."""

    @abstractmethod
    def save_settings(self, settings: AppSettings) -> None:
        """Replace the stored settings."""

    def close(self) -> None:
        """Release any held resources."""
