"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskDraft, Priority) and JSON mapping
- sorting.py: display order (priority, then due date)
- task_api.py: httpx client for the remote /tasks API
"""

from .sorting import priority_rank, sort_tasks
from .task_api import TaskApiClient, TaskApiError
from .task_models import Priority, Task, TaskDraft

__all__ = [
    "Priority",
    "Task",
    "TaskApiClient",
    "TaskApiError",
    "TaskDraft",
    "priority_rank",
    "sort_tasks",
]
