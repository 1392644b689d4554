from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.enums import DocumentKind
from .model import EmployeeReport


class DocumentRenderer(ABC):
    """Renderer interface: structured report in, document bytes out."""

    kind: DocumentKind

    @abstractmethod
    def render(self, report: EmployeeReport) -> bytes:
        raise NotImplementedError
