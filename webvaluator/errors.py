"""
Error types raised by the estimator core.

ValidationError: bad or missing input field. Recoverable; the caller rejects
the request and no calculation is attempted.

ConfigurationError: a required price table has no entry for a value that
passed validation. Fatal to the request; never silently defaulted.
"""


class EstimatorError(Exception):
    """Base class for estimator errors."""


class ValidationError(EstimatorError):
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")

    def to_dict(self) -> dict:
        return {"field": self.field, "reason": self.reason}


class ConfigurationError(EstimatorError):
    def __init__(self, table: str, key: str):
        self.table = table
        self.key = key
        super().__init__(f"No '{key}' entry in {table} price table")
