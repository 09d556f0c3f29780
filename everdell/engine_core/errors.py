"""
Engine errors.

Every failure inside next() is one of these. The transition works on a
clone, so raising abandons it wholesale and the caller's state is untouched.

Error Codes:
- ILLEGAL_ACTION: a can_play check refused the move
- INVALID_INPUT: malformed input, or a selection outside the offered options
- OVERPAY: a payment exceeds the exact cost
- INVARIANT_VIOLATION: internal bookkeeping is inconsistent (a caller bug)
"""


class EverdellError(Exception):
    """Base class for all engine errors."""
    error_code = "ENGINE_ERROR"


class IllegalActionError(EverdellError):
    """The action is not allowed in the current state."""
    error_code = "ILLEGAL_ACTION"


class InvalidInputError(EverdellError):
    """The game input is malformed or does not match what was asked for."""
    error_code = "INVALID_INPUT"


class OverpayError(InvalidInputError):
    """Payment for a card is more than its exact cost."""
    error_code = "OVERPAY"


class InvariantError(EverdellError):
    """Internal consistency check failed."""
    error_code = "INVARIANT_VIOLATION"
