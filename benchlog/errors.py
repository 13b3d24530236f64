"""Exception types raised by the workout log."""


class BenchlogError(Exception):
    """Base class for errors raised by :mod:`benchlog`."""


class WorkoutFormatError(BenchlogError, ValueError):
    """A stored or imported record does not describe a valid workout."""


class StorageError(BenchlogError):
    """The underlying key-value store failed."""
