"""
Error taxonomy for ndlite.

The engine reports exactly two kinds of failure, both raised synchronously at
the point of detection and without producing a partial result:

- :class:`OutOfRangeError` for values outside their required bounds (axis
  indices, finite-difference order, empty operands of argmin/argmax, ranks
  above the fixed cap, NaN or infinity stored into an integer array).
- :class:`OperandTypeError` for arguments of an unacceptable kind (an axis
  that is not None or an integer, an operand that is neither an array nor a
  host sequence).

Both subclass the matching builtin (``ValueError`` / ``TypeError``) so callers
that already handle the builtins keep working.
"""

from __future__ import annotations

from typing import Any, Optional


class OutOfRangeError(ValueError):
    """
    Raised when a value falls outside the bounds an operation requires.

    Attributes
    ----------
    what : str
        Short name of the offending quantity (e.g., "axis", "order").
    value : Any
        The value that was rejected.
    bounds : Optional[tuple[int, int]]
        Inclusive (low, high) bounds that were expected, when meaningful.
    """

    def __init__(
        self,
        what: str,
        value: Any,
        bounds: Optional[tuple[int, int]] = None,
        *,
        detail: str = "",
    ) -> None:
        """
        Initialize the OutOfRangeError.

        Parameters
        ----------
        what : str
            Name of the quantity that is out of range.
        value : Any
            The rejected value.
        bounds : Optional[tuple[int, int]], optional
            Inclusive bounds that were expected.
        detail : str, optional
            Extra context appended to the message.
        """
        msg = f"{what} {value!r} out of range"
        if bounds is not None:
            msg += f" [{bounds[0]}, {bounds[1]}]"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.what = what
        self.value = value
        self.bounds = bounds


class EmptyOperandError(OutOfRangeError):
    """
    Raised when an extremum or its index is requested from an empty operand.
    """

    def __init__(self, op: str) -> None:
        super().__init__(
            "length", 0, detail=f"attempt to get {op} of an empty sequence"
        )
        self.op = op


class OperandTypeError(TypeError):
    """
    Raised when an argument is not of an acceptable kind.

    Attributes
    ----------
    op : str
        The operation that rejected the argument.
    received : str
        Name of the type that was received.
    """

    def __init__(self, op: str, expected: str, received: Any) -> None:
        """
        Initialize the OperandTypeError.

        Parameters
        ----------
        op : str
            Operation name (e.g., "sum", "flip").
        expected : str
            Human-readable description of what was expected.
        received : Any
            The offending argument; only its type name is kept.
        """
        received_name = type(received).__name__
        super().__init__(f"{op}: {expected}, got {received_name}")
        self.op = op
        self.received = received_name
