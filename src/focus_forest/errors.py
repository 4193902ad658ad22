"""Error taxonomy for focus-forest.

// [LAW:one-source-of-truth] Every rejection reason is an enum member here.
// [LAW:dataflow-not-control-flow] Callers branch on `reason`, never on message text.

ValidationError and InvalidTransition are local and recoverable: the intent
was refused and no state changed. ConfigurationError is a wiring defect in
the reactive graph and is meant to abort initialization.
"""

from enum import Enum


class ValidationReason(Enum):
    EMPTY_TASK = "EmptyTask"
    INVALID_COLOR = "InvalidColor"
    UNSUPPORTED_LANGUAGE = "UnsupportedLanguage"
    INVALID_FONT_SIZE = "InvalidFontSize"
    UNKNOWN_PAGE = "UnknownPage"


class TransitionReason(Enum):
    ALREADY_RUNNING = "AlreadyRunning"
    NOT_RUNNING = "NotRunning"
    TASK_LOCKED = "TaskLocked"


class ConfigurationReason(Enum):
    DEPENDENCY_CYCLE = "DependencyCycle"
    REENTRANT_WRITE = "ReentrantWrite"
    REACTION_LOOP = "ReactionLoop"


class FocusForestError(Exception):
    """Base class. `reason` is the enum member that classifies the failure."""

    def __init__(self, reason: Enum, detail: str = ""):
        self.reason = reason
        self.detail = detail
        message = f"{reason.value}: {detail}" if detail else reason.value
        super().__init__(message)


class ValidationError(FocusForestError):
    """User input rejected. No state was mutated."""


class InvalidTransition(FocusForestError):
    """Operation not permitted in the current session state. No state was mutated."""


class ConfigurationError(FocusForestError):
    """Reactive graph wiring defect (cycle, reentrant write, runaway reactions)."""
