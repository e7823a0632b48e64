"""Base exceptions for fsfilter domain."""


class FsFilterError(Exception):
    """Root exception for all fsfilter errors.

    All domain exceptions inherit from this.
    Allows catching all fsfilter-specific errors.
    """
