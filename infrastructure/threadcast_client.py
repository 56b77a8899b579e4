import logging
import random
import time
from typing import Any, Callable, Dict, List, Optional

import requests

logger = logging.getLogger("todo_graph.api")


class ThreadcastClientError(RuntimeError):
    pass


class ThreadcastPermissionError(ThreadcastClientError):
    pass


class ThreadcastClient:
    """Minimal ThreadCast REST client for todos and their dependencies.

    Every response is an ApiResponse envelope: {"success", "data", "error"}.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        timeout: int = 30,
        max_attempts: int = 3,
    ) -> None:
        if not base_url:
            raise ThreadcastClientError("ThreadCast API URL is not configured")
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.token_provider = token_provider or (lambda: None)
        self.timeout = timeout
        self.max_attempts = max_attempts

    def list_todos(self, mission_id: str) -> List[Dict[str, Any]]:
        data = self.request("get", "/todos", params={"missionId": mission_id})
        if isinstance(data, dict):
            # paged responses wrap the list
            data = data.get("content") or data.get("items") or []
        return list(data or [])

    def get_todo(self, todo_id: str) -> Dict[str, Any]:
        return self.request("get", f"/todos/{todo_id}") or {}

    def update_dependencies(self, todo_id: str, dependencies: List[str]) -> Dict[str, Any]:
        return self.request("patch", f"/todos/{todo_id}/dependencies", payload={"dependencies": list(dependencies)}) or {}

    def request(
        self,
        method: str,
        path: str,
        *,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self.token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        attempt = 0
        delay = 1.0
        while True:
            attempt += 1
            try:
                response = getattr(self.session, method)(
                    url, json=payload, params=params, headers=headers, timeout=self.timeout
                )
            except requests.RequestException as exc:
                if attempt >= self.max_attempts:
                    raise ThreadcastClientError(f"ThreadCast API network error: {exc}") from exc
                logger.debug("Retrying %s %s after network error: %s", method.upper(), path, exc)
                self._sleep(delay)
                delay *= 2
                continue
            if response.status_code >= 500 and attempt < self.max_attempts:
                self._sleep(delay)
                delay *= 2
                continue
            if response.status_code in (401, 403):
                raise ThreadcastPermissionError(f"HTTP {response.status_code}")
            body = self._json(response)
            if response.status_code >= 400:
                raise ThreadcastClientError(
                    f"ThreadCast API error: {response.status_code} {self._error_message(body) or response.text}"
                )
            if isinstance(body, dict) and body.get("success") is False:
                raise ThreadcastClientError(self._error_message(body) or "ThreadCast API request failed")
            if isinstance(body, dict) and "data" in body:
                return body["data"]
            return body

    def _sleep(self, base_delay: float) -> None:
        time.sleep(base_delay + random.uniform(0, base_delay))

    @staticmethod
    def _json(response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _error_message(body: Any) -> str:
        if not isinstance(body, dict):
            return ""
        error = body.get("error")
        if isinstance(error, dict):
            return str(error.get("message") or error.get("code") or "")
        return str(body.get("message") or "")


__all__ = ["ThreadcastClient", "ThreadcastClientError", "ThreadcastPermissionError"]
