class CalgregError(Exception):
    """Base error."""

class ContractError(CalgregError):
    """Raised when a caller breaks a documented precondition (e.g. an offset outside [0, DAY_MAX])."""
