"""Base error for failures the tool reports to the operator.

I/O failures are not wrapped: they surface as the builtin OSError.
"""


class BindgenError(Exception):
    """Base class for generation, language and patch errors."""
