"""Exceptions raised by simulation models during valuation."""


class ModelQueryError(ValueError):
    """A simulation model cannot produce a value for the requested time.

    Valuers do not catch this: a period that cannot be evaluated makes the
    whole valuation invalid, so the error reaches the caller unchanged.
    """
