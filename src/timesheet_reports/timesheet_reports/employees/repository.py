from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_active_for_client(self, client_id: str) -> Sequence[Employee]:
        """Employees of a client that are not soft-deleted."""

        raise NotImplementedError
