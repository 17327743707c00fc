from __future__ import annotations

from typing import NewType

TaskId = NewType("TaskId", int)
