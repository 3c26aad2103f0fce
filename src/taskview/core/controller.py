# src/taskview/core/controller.py

"""
Task view controller.

Owns the ViewState and FormState and exposes one coroutine per user action.
Every mutation is followed by a full list reload; the server's list is the
only source of truth and mutation responses are never merged locally.

Concurrency:
- submit and delete set `loading`, which the console uses to refuse further
  form/delete input until they finish.
- toggle does not set `loading`. Instead each task id can have at most one
  toggle in flight, and every list fetch is numbered so that a fetch which
  completes after a newer one has been applied is dropped.
- after unmount() no result touches the state any more.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..tasks.sorting import sort_tasks
from ..tasks.task_api import TaskApiError
from ..tasks.task_models import Task
from .ports import TaskApi
from .state import FormState, ViewState

logger = logging.getLogger(__name__)

DELETE_CONFIRM_PROMPT = "Are you sure you want to delete this task?"


class TaskViewController:
    def __init__(self, api: TaskApi) -> None:
        self.api = api
        self.state = ViewState()
        self.form = FormState()

        self._unmounted = False
        self._fetch_seq = 0
        self._applied_seq = 0

    # -------------------- lifecycle --------------------

    @property
    def mounted(self) -> bool:
        return not self._unmounted

    async def mount(self) -> bool:
        """Initial display: fetch and sort the full list."""
        logger.debug("Task view mounted.")
        return await self.load_tasks()

    def unmount(self) -> None:
        self._unmounted = True
        logger.debug("Task view unmounted; late responses will be ignored.")

    # -------------------- helpers --------------------

    def find_task(self, task_id: str) -> Task | None:
        for t in self.state.tasks:
            if t.id == task_id:
                return t
        return None

    def _begin(self) -> None:
        if self._unmounted:
            return
        self.state.loading = True
        self.state.error = None

    def _end(self) -> None:
        if self._unmounted:
            return
        self.state.loading = False

    def _fail(self, what: str, exc: TaskApiError) -> None:
        logger.warning("Error %s: %s", what, exc)
        if self._unmounted:
            return
        self.state.error = str(exc)

    async def _refresh(self) -> bool:
        """
        Fetch, sort and publish the list.

        Does not touch `loading`; callers own that. Returns False on failure.
        """
        self._fetch_seq += 1
        seq = self._fetch_seq
        try:
            tasks = await self.api.list_tasks()
        except TaskApiError as exc:
            self._fail("fetching tasks", exc)
            return False

        if self._unmounted:
            return False
        if seq < self._applied_seq:
            logger.debug("Dropping stale task list (fetch #%d, newest applied #%d).", seq, self._applied_seq)
            return True

        self._applied_seq = seq
        self.state.tasks = sort_tasks(tasks)
        logger.debug("Task list refreshed: %d tasks (fetch #%d).", len(self.state.tasks), seq)
        return True

    # -------------------- operations --------------------

    async def load_tasks(self) -> bool:
        """Full load with the busy flag set. On failure `tasks` keeps its value."""
        self._begin()
        try:
            return await self._refresh()
        finally:
            self._end()

    async def submit(self) -> bool:
        """
        Create a task from the form, reload the list, then clear the form.

        The form is left as typed if either the create or the reload fails.
        """
        draft = self.form.to_draft()
        self._begin()
        try:
            try:
                created = await self.api.create_task(draft)
            except TaskApiError as exc:
                self._fail("creating task", exc)
                return False
            if created is None:
                logger.info("Created task (%s); server sent no record back.", draft.title)
            else:
                logger.info("Created task %s (%s).", created.id, created.title)

            if not await self._refresh():
                return False

            if not self._unmounted:
                self.form.reset()
            return True
        finally:
            self._end()

    async def toggle_complete(self, task_id: str) -> bool:
        """
        Flip `completed` via a full replace, then reload.

        Unknown ids and ids with a toggle already in flight are ignored.
        """
        task = self.find_task(task_id)
        if task is None:
            logger.debug("Toggle ignored: task %s is not in the list.", task_id)
            return False
        if task_id in self.state.toggling:
            logger.debug("Toggle ignored: task %s already has a toggle in flight.", task_id)
            return False

        self.state.toggling.add(task_id)
        if not self._unmounted:
            self.state.error = None
        try:
            try:
                await self.api.replace_task(task.id, replace(task, completed=not task.completed))
            except TaskApiError as exc:
                self._fail("updating task", exc)
                return False
            return await self._refresh()
        finally:
            self.state.toggling.discard(task_id)

    def request_delete(self, task_id: str) -> str:
        """First phase of delete: remember the id and return the question to ask."""
        self.state.pending_delete = task_id
        return DELETE_CONFIRM_PROMPT

    def cancel_delete(self) -> None:
        """Declined confirmation: nothing is sent to the server."""
        if self.state.pending_delete is not None:
            logger.debug("Delete of task %s cancelled.", self.state.pending_delete)
        self.state.pending_delete = None

    async def confirm_delete(self) -> bool:
        """Second phase of delete: one DELETE followed by one list reload."""
        task_id = self.state.pending_delete
        if task_id is None:
            return False
        self.state.pending_delete = None

        self._begin()
        try:
            try:
                await self.api.delete_task(task_id)
            except TaskApiError as exc:
                self._fail("deleting task", exc)
                return False
            logger.info("Deleted task %s.", task_id)
            return await self._refresh()
        finally:
            self._end()
