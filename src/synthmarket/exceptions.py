class SynthMarketError(Exception):
    """Base class for errors raised by synthmarket."""


class InvalidConfiguration(SynthMarketError, ValueError):
    """A simulation or process parameter is non-finite, non-real or out of range."""
