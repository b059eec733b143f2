from cssvars.engine.controller import WATCHED_EVENTS, RegenerationController
from cssvars.engine.debounce import Debouncer
from cssvars.engine.output import write_atomic

__all__ = ["WATCHED_EVENTS", "Debouncer", "RegenerationController", "write_atomic"]
