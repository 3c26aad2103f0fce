# src/taskview/tasks/task_api.py

"""
HTTP client for the remote task API.

Every failure (non-2xx status, network error, unreadable JSON) is reported as
a TaskApiError carrying a fixed per-operation message. The server's error body
is never surfaced to the user; it only goes to the debug log.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .task_models import Task, TaskDraft

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch tasks"
CREATE_FAILED = "Failed to create task"
UPDATE_FAILED = "Failed to update task"
DELETE_FAILED = "Failed to delete task"


class TaskApiError(RuntimeError):
    """Raised when a task API call fails for any reason."""


def _make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(connect=connect_s, read=read_s, write=10.0, pool=connect_s)


class TaskApiClient:
    """Async client for /tasks. One instance owns one httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        *,
        connect_timeout: float = 5.0,
        read_timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=_make_timeout(connect_timeout, read_timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings) -> TaskApiClient:
        return cls(
            str(getattr(settings, "api_base_url")),
            connect_timeout=float(getattr(settings, "connect_timeout", 5.0)),
            read_timeout=float(getattr(settings, "read_timeout", 15.0)),
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        failure: str,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            # json= also sets Content-Type: application/json.
            resp = await self._client.request(method, path, json=body)
        except httpx.HTTPError as exc:
            logger.debug("%s %s transport error: %s", method, path, exc)
            raise TaskApiError(failure) from exc

        if not resp.is_success:
            logger.debug("%s %s -> HTTP %s: %s", method, path, resp.status_code, resp.text[:500])
            raise TaskApiError(failure)
        return resp

    @staticmethod
    def _json(resp: httpx.Response, failure: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            logger.debug("Unreadable JSON from %s: %r", resp.request.url, resp.text[:500])
            raise TaskApiError(failure) from exc

    async def list_tasks(self) -> list[Task]:
        resp = await self._request("GET", "/tasks", failure=FETCH_FAILED)
        data = self._json(resp, FETCH_FAILED)
        if not isinstance(data, list):
            logger.debug("Expected a JSON array from GET /tasks, got %s", type(data).__name__)
            raise TaskApiError(FETCH_FAILED)

        # One broken record should not hide the rest of the list.
        tasks: list[Task] = []
        for item in data:
            try:
                tasks.append(Task.from_api(item))
            except (AttributeError, ValueError):
                logger.warning("Skipping task record without a usable id: %r", item)
        return tasks

    async def create_task(self, draft: TaskDraft) -> Task | None:
        resp = await self._request("POST", "/tasks", failure=CREATE_FAILED, body=draft.to_api())
        # The view reloads the list afterwards, so the body is informational only.
        try:
            return Task.from_api(resp.json())
        except (AttributeError, ValueError):
            logger.debug("POST /tasks returned no task record: %r", resp.text[:500])
            return None

    async def replace_task(self, task_id: str, task: Task) -> Task:
        resp = await self._request(
            "PUT", f"/tasks/{task_id}", failure=UPDATE_FAILED, body=task.to_api()
        )
        # Some servers answer PUT with an empty body; the status alone decides.
        try:
            return Task.from_api(resp.json())
        except (AttributeError, ValueError):
            logger.debug("PUT /tasks/%s returned no task record; keeping the sent one", task_id)
            return task

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"/tasks/{task_id}", failure=DELETE_FAILED)
