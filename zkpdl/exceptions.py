"""
Common exception classes.
"""


class InvalidStateError(Exception):
    """Prover or verifier operation called out of sequence, or more than once."""


class InvalidParameterError(Exception):
    """Exponent, element, or bound outside of its admissible range."""


class GroupArithmeticError(Exception):
    """Group operation on values that are not valid group elements."""


class InsecureParametersWarning(UserWarning):
    """Group parameters too small to provide any security."""
