"""cssvars model layer -- public type re-exports."""

from cssvars.model.config import DEFAULT_DEBOUNCE_SECONDS, Classifier, GeneratorConfig
from cssvars.model.outcome import CycleOutcome, CycleState, CycleStatus
from cssvars.model.target import ExtractionTarget, is_identifier
from cssvars.model.variables import VariableDescriptor

__all__ = [
    # target
    "ExtractionTarget",
    "is_identifier",
    # config
    "Classifier",
    "GeneratorConfig",
    "DEFAULT_DEBOUNCE_SECONDS",
    # variables
    "VariableDescriptor",
    # outcome
    "CycleState",
    "CycleStatus",
    "CycleOutcome",
]
