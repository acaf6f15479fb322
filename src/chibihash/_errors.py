"""ChibiHash error types."""


class ChibiHashError(Exception):
    """Base error for all chibihash failures."""
