class FfmException(Exception):
    """Base class for errors raised (rather than returned) by the league manager."""
