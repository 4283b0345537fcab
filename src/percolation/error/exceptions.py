"""Exceptions raised by the percolation core."""


class PercolationError(Exception):
    """Base class for all percolation errors."""


class InvalidArgumentError(PercolationError, ValueError):
    """A size, probability or trial count is outside its valid range."""


class IndexOutOfRangeError(PercolationError, IndexError):
    """A union-find index or grid coordinate is out of bounds."""
