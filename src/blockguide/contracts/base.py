"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism for all contracts.
"""

from blockguide.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Enforce a stage contract.

    Called at stage boundaries to verify the preceding stage produced the
    guaranteed invariants. No recovery, no fallback, no silence.

    Parameters
    ----------
    condition : bool
        The invariant that must be true. If False, ContractViolation is raised.

    message : str
        Error message explaining the contract violation (for debugging).

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require(grid.ndim == 2, "Grid contract: expected a 2D grid")
    >>> require(len(df) > 0, "Segment table contract: at least one row expected")
    """
    if not condition:
        raise ContractViolation(message)
