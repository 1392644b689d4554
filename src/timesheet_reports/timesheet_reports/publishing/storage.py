from __future__ import annotations

from typing import Protocol
from urllib.parse import quote

import requests

from ..core.exceptions import StorageError


class ObjectStorage(Protocol):
    def upload(self, *, bucket: str, path: str, content: bytes, content_type: str) -> None:
        """Write ``content`` to ``bucket/path``, overwriting an existing object."""

        raise NotImplementedError


class SupabaseStorage(ObjectStorage):
    """Object storage through the Supabase storage REST API."""

    def __init__(self, *, base_url: str, service_key: str, timeout: float = 30, session: requests.Session | None = None):
        self._base_url = base_url.rstrip("/")
        self._service_key = service_key
        self._timeout = timeout
        self._session = session or requests.Session()

    def _headers(self, content_type: str) -> dict:
        return {
            "Authorization": f"Bearer {self._service_key}",
            "apikey": self._service_key,
            "Content-Type": content_type,
            "x-upsert": "true",
        }

    def object_url(self, bucket: str, path: str) -> str:
        return f"{self._base_url}/storage/v1/object/{quote(bucket)}/{quote(path)}"

    def upload(self, *, bucket: str, path: str, content: bytes, content_type: str) -> None:
        url = self.object_url(bucket, path)
        try:
            r = self._session.post(url, data=content, headers=self._headers(content_type), timeout=self._timeout)
        except requests.RequestException as exc:
            raise StorageError(f"upload of {bucket}/{path} failed: {exc}") from exc
        if r.status_code >= 400:
            raise StorageError(f"upload of {bucket}/{path} failed: HTTP {r.status_code} {r.text[:200]}")
