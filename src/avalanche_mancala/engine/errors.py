class MancalaError(Exception):
    """Base class for board contract violations."""


class ConfigurationError(MancalaError, ValueError):
    """Board populated or configured with unusable values."""


class SlotLookupError(MancalaError, LookupError):
    """Store, slot or position not present on this board instance."""


class RunawaySowingError(MancalaError, RuntimeError):
    """Avalanche chain exceeded the configured lap ceiling."""
