class RingFieldError(Exception):
    """Base class for errors raised by ringfields."""


class ConfigurationError(RingFieldError):
    """A ring type has no generator registered for it."""


class PresetNotFoundError(RingFieldError, LookupError):
    """No preset configuration exists under the requested name."""

    def __init__(self, name, available=()):
        self.name = name
        self.available = tuple(available)
        msg = f"Unknown preset: {name!r}"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        super().__init__(msg)


class DegenerateInputWarning(RuntimeWarning):
    """
    Configuration values that cannot produce a well formed field. Generators
    clamp or short circuit instead of failing.
    """
