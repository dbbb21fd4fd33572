"""
ContainersClient - consumer-side helper for the containers API.

Keeps a local mirror of GET /api/containers. Every successful mutation is
followed by a full re-fetch instead of patching the mirror; lists are small.
Only the most recent error message is kept.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class ContainersClient:
    def __init__(self, http: httpx.Client, base_path: str = "/api/containers") -> None:
        self.http = http
        self.base_path = base_path
        self.containers: List[Dict[str, Any]] = []
        self.is_loading = False
        self.error: Optional[str] = None

    def fetch_containers(self) -> None:
        self.is_loading = True
        try:
            response = self.http.get(self.base_path)
            if response.is_error:
                raise RuntimeError("Failed to load containers")
            self.containers = response.json()
            self.error = None
        except (httpx.HTTPError, RuntimeError) as exc:
            self.error = str(exc)
            logger.warning("Fetching containers failed: %s", exc)
        finally:
            self.is_loading = False

    def _mutate(self, method: str, url: str, failure: str, **kwargs: Any) -> bool:
        try:
            response = self.http.request(method, url, **kwargs)
            if response.is_error:
                raise RuntimeError(failure)
        except (httpx.HTTPError, RuntimeError) as exc:
            self.error = failure
            logger.warning("%s: %s", failure, exc)
            return False

        self.fetch_containers()
        return True

    def create_container(self, data: Dict[str, Any]) -> bool:
        return self._mutate("POST", self.base_path, "Failed to create container", json=data)

    def update_container(self, container_id: int, data: Dict[str, Any]) -> bool:
        return self._mutate(
            "PUT",
            f"{self.base_path}/{container_id}",
            "Failed to update container",
            json=data,
        )

    def delete_container(self, container_id: int) -> bool:
        return self._mutate(
            "DELETE", f"{self.base_path}/{container_id}", "Failed to delete container"
        )
