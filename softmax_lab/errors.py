"""
Error kinds raised by softmax_lab.
"""


class InvalidArgumentError(ValueError):
    """An argument is outside the domain the operation is defined on."""
