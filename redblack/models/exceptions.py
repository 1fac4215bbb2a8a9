"""
Custom exceptions for the red-black tree.
"""


class InvariantViolationError(Exception):
    """
    Raised when a red-black tree invariant does not hold.

    This indicates an implementation defect, never a caller error. It is only
    raised by the invariant checker, which tests and debugging sessions call
    explicitly.
    """

    def __init__(self, invariant: str, detail: str):
        """
        Initialize invariant violation error.

        Args:
            invariant: Short name of the violated invariant (e.g. "red-root").
            detail: Human readable description of where it was violated.
        """
        self.invariant = invariant
        self.detail = detail
        super().__init__(f"Red-black invariant '{invariant}' violated: {detail}")
