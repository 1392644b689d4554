from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Client


class ClientRepository(Protocol):
    """Repository interface for clients.

    Note (DIP): the report service depends on this interface, not on a concrete DB.
    """

    def list_due(self, *, shipment_day: int) -> Sequence[Client]:
        """Active clients whose next shipment (``istversand``) is ``shipment_day``."""

        raise NotImplementedError

    def update_schedule(self, *, client_id: str, lastversand: int, istversand: Optional[int] = None) -> bool:
        """Persist the shipment state; ``istversand`` is left untouched when None."""

        raise NotImplementedError
