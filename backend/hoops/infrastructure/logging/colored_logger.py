"""Colored console logging for the hoop submission and replication pipelines.

Each stage has its own color and icon so a submission can be followed
through the log at a glance:

    📥 INTAKE     green    form parsed into a hoop
    💾 RECORD     green    media and record saved
    📊 REPLICATE  cyan     saved record pushed to the spreadsheet
    ✅ COMPLETE   green    submission finished
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

PIPELINE_LOGGER_NAME = "HoopPipeline"

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_GRAY = "\033[90m"


@dataclass(frozen=True)
class Stage:
    label: str
    color: str
    icon: str

    def tag(self, bold: bool = False) -> str:
        weight = _BOLD if bold else ""
        return f"{self.color}{weight}{self.icon} [{self.label}]{_RESET}"


class PipelineStage:
    """The stages a hoop passes through."""

    INTAKE = Stage("INTAKE", _GREEN, "📥")
    RECORD = Stage("RECORD", _GREEN, "💾")
    REPLICATE = Stage("REPLICATE", _CYAN, "📊")
    COMPLETE = Stage("COMPLETE", _GREEN, "✅")


def _fields(values: dict[str, Any]) -> str:
    if not values:
        return ""
    joined = " | ".join(f"{key}={value}" for key, value in values.items())
    return f" {_GRAY}({joined}){_RESET}"


class PipelineLogger:
    """Writes stage-tagged, colored lines to the ``HoopPipeline`` logger.

    Usage:
        plog = PipelineLogger()
        plog.step_start(PipelineStage.INTAKE, "Hoop 3f2b...", fields=7)
        with plog.timed_step(PipelineStage.RECORD, "Saving 20261019..."):
            ...
    """

    def __init__(self, name: str = PIPELINE_LOGGER_NAME):
        self._logger = logging.getLogger(name)

    def step_start(self, stage: Stage, message: str, **fields: Any) -> None:
        self._logger.info(f"{stage.tag(bold=True)} {stage.color}{message}{_RESET}{_fields(fields)}")

    def step_complete(self, stage: Stage, message: str, **fields: Any) -> None:
        self._logger.info(f"{stage.tag()} {_GREEN}✓ {message}{_RESET}{_fields(fields)}")

    def step_error(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        line = f"{_RED}{_BOLD}❌ [{stage.label}]{_RESET} {_RED}{message}{_RESET}"
        if error is not None:
            line += f" {_DIM}→ {type(error).__name__}: {error}{_RESET}"
        self._logger.error(line)

    def detail(self, message: str, **fields: Any) -> None:
        self._logger.info(f"   {_GRAY}├─ {message}{_RESET}{_fields(fields)}")

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any):
        """Log ``message`` on entry and again on exit with the elapsed time.

        An exception is logged in red and re-raised.
        """
        self.step_start(stage, message, **fields)
        started = time.perf_counter()
        try:
            yield
        except Exception as exc:
            self.step_error(stage, f"{message} failed after {time.perf_counter() - started:.2f}s", error=exc)
            raise
        self.step_complete(stage, f"{message} in {time.perf_counter() - started:.2f}s")
