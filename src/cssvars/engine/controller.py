"""Regeneration controller: runs extract -> generate -> write -> format cycles.

Cycles are triggered at startup and by change/add events on the source file.
Events are debounced, and cycles are serialized by a lock, so two cycles never
run at the same time. A failed cycle leaves the previous output untouched.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

from cssvars.engine.debounce import Debouncer
from cssvars.engine.output import write_atomic
from cssvars.errors import CssVarsError, FormatterError
from cssvars.events.bus import EventBus
from cssvars.events.types import (
    FormattingFailed,
    RegenerationFailed,
    RegenerationStarted,
    RegenerationSucceeded,
)
from cssvars.extraction import extract_from_file
from cssvars.formatting import Formatter, NullFormatter, load_formatting_tools
from cssvars.model.config import GeneratorConfig
from cssvars.model.outcome import CycleOutcome, CycleState, CycleStatus
from cssvars.stylesheet import render_stylesheet

logger = logging.getLogger(__name__)

FormatterFactory = Callable[[], Formatter]

WATCHED_EVENTS = frozenset({"change", "add"})


class RegenerationController:
    """Owns the regeneration cycle for one source constant and one output file.

    Args:
        config: Generator configuration; paths are resolved to absolute form.
        formatter_factory: Builds the formatter. Called lazily, once, the first
            time a cycle reaches the formatting stage.
        bus: Receives lifecycle events. A private bus is created if omitted.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        formatter_factory: FormatterFactory | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self._config = config.resolve()
        if formatter_factory is None:
            formatter_factory = self._default_formatter_factory
        self._formatter_factory = formatter_factory
        self._formatter: Formatter | None = None
        self.bus = bus or EventBus()
        self._cycle_lock = threading.Lock()
        self._state = CycleState.IDLE
        self._debouncer = Debouncer(self._config.debounce_seconds, self._on_debounced)
        self.cycles_run = 0

    # --- properties -----------------------------------------------------------

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def state(self) -> CycleState:
        return self._state

    @property
    def formatter(self) -> Formatter | None:
        """The cached formatter, or None until the first formatting stage."""
        return self._formatter

    @property
    def pending(self) -> bool:
        """True while a debounced cycle is waiting to run."""
        return self._debouncer.pending

    # --- triggers -------------------------------------------------------------

    def start(self) -> CycleOutcome:
        """Run the startup cycle."""
        return self.regenerate(trigger="start")

    def handle_event(self, event: str, path: str | Path) -> bool:
        """React to a file-system event. Returns True if a cycle was scheduled."""
        if event not in WATCHED_EVENTS:
            return False
        if Path(path).resolve() != self._config.source_path:
            return False
        logger.debug("%s event on %s", event, path)
        self.schedule()
        return True

    def schedule(self) -> None:
        """Request a debounced cycle."""
        self._debouncer.trigger()

    def close(self) -> None:
        """Cancel any pending debounced cycle."""
        self._debouncer.cancel()

    def _on_debounced(self) -> None:
        self.regenerate(trigger="change")

    # --- cycle ----------------------------------------------------------------

    def regenerate(self, trigger: str = "manual") -> CycleOutcome:
        """Run one full cycle and report the outcome. Failures never propagate."""
        with self._cycle_lock:
            self.cycles_run += 1
            self.bus.emit(RegenerationStarted(self._config.source_path, trigger))
            try:
                outcome = self._run_cycle()
            except CssVarsError as exc:
                outcome = self._fail(str(exc), exc.kind)
            except OSError as exc:
                outcome = self._fail(str(exc), "io")
            except Exception as exc:
                logger.exception("Unexpected error during CSS generation")
                outcome = self._fail(str(exc), "error")
            finally:
                self._state = CycleState.IDLE
        return outcome

    def _run_cycle(self) -> CycleOutcome:
        cfg = self._config

        self._state = CycleState.EXTRACTING
        mapping = extract_from_file(cfg.target)

        self._state = CycleState.GENERATING
        document = render_stylesheet(mapping, cfg.prefix, cfg.classifier)

        self._state = CycleState.WRITING
        write_atomic(cfg.output_path, document)

        self._state = CycleState.FORMATTING
        self._format(cfg.output_path)

        logger.info("CSS variables updated: %s", cfg.output_path)
        self.bus.emit(RegenerationSucceeded(cfg.output_path, len(mapping)))
        return CycleOutcome(
            status=CycleStatus.SUCCESS,
            output_path=cfg.output_path,
            variable_count=len(mapping),
        )

    def _fail(self, error: str, kind: str) -> CycleOutcome:
        logger.error("CSS generation failed (%s): %s", kind, error)
        self.bus.emit(RegenerationFailed(error, kind))
        return CycleOutcome(status=CycleStatus.FAIL, error=error, error_kind=kind)

    # --- formatting -----------------------------------------------------------

    def _default_formatter_factory(self) -> Formatter:
        if not self._config.format_output:
            return NullFormatter()
        tools = load_formatting_tools(
            self._config.prettier_config_path, self._config.eslint_config_path
        )
        if not tools.enabled:
            logger.info("No formatter configured; output is written unformatted")
            return NullFormatter()
        return tools

    def _format(self, path: Path) -> None:
        try:
            if self._formatter is None:
                self._formatter = self._formatter_factory()
            self._formatter.format(path)
        except (FormatterError, OSError) as exc:
            logger.warning("Formatting error: %s", exc)
            self.bus.emit(FormattingFailed(path, str(exc)))
