"""Exception types shared by all matcfg modules.

Import Policy:
    from matcfg.core.errors import BadInput, CalcError
"""


class BadInput(ValueError):
    """Raised when a configuration value or string is invalid.

    Covers both syntax errors (malformed tokens) and range errors (well-formed
    values outside the declared domain). The message always names the
    offending parameter and value.
    """

    pass


class CalcError(ArithmeticError):
    """Raised when a numerical helper is called outside its domain of validity."""

    pass
