"""Failure type for contract violations.

Contracts fail fast, loud, and once. All violations raise the same
exception type, allowing callers to handle stage bugs uniformly.
"""


class ContractViolation(RuntimeError):
    """Raised when a stage contract is violated.

    This indicates a bug in the calling code, not bad user input or a
    degenerate shape. It means a stage did not receive or produce the
    invariants it promised.

    Key distinction:
    - ValueError / ValidationError: User/config error (handled by Pydantic)
    - ContractViolation: Stage bug (programmer error)
    - Degenerate shapes (empty grids, zero radius): not errors at all
    """
    pass
