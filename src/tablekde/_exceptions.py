"""Exception types raised by tablekde."""


class ConfigError(ValueError):
    """
    Raised when transform options are invalid.

    Always raised while options are being resolved, before the view is read
    or mutated.
    """
