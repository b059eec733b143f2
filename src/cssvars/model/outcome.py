"""Outcome model: status and result data from a regeneration cycle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class CycleState(Enum):
    """Stage a regeneration cycle is currently in."""

    IDLE = "idle"
    EXTRACTING = "extracting"
    GENERATING = "generating"
    WRITING = "writing"
    FORMATTING = "formatting"


class CycleStatus(Enum):
    """Possible results of a regeneration cycle."""

    SUCCESS = "success"
    FAIL = "fail"


@dataclass(frozen=True)
class CycleOutcome:
    """Result produced by one regeneration cycle."""

    status: CycleStatus
    output_path: Path | None = None
    error: str = ""
    error_kind: str = ""
    variable_count: int = 0

    @property
    def succeeded(self) -> bool:
        return self.status is CycleStatus.SUCCESS

    @property
    def failed(self) -> bool:
        return self.status is CycleStatus.FAIL
