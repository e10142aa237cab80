class SchedulerError(Exception):
    """Base class for every error raised by the scheduling engine."""


class ConfigurationError(SchedulerError, ValueError):
    """Bad run configuration (quantum, input source, algorithm name).

    Raised before any scheduling decision is made.
    """


class SchedulingInvariantError(SchedulerError, RuntimeError):
    """Arrival/completion bookkeeping went inconsistent mid-run."""
