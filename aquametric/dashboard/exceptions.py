"""
Pond dashboard exceptions.

Degenerate numeric input never raises; these cover lookups and programming errors.
"""


class PondNotFoundError(LookupError):
    """Raised when a pond id is not present in the store"""
    
    def __init__(self, pond_id: str):
        super().__init__(f"Pond '{pond_id}' not found")
        self.pond_id = pond_id


class DuplicateSamplingError(ValueError):
    """Raised when a pond already has a sampling recorded on the same date"""
    
    def __init__(self, pond_id: str, date: str):
        super().__init__(f"Sampling for pond '{pond_id}' on {date} already exists")
        self.pond_id = pond_id
        self.date = date


class UnknownMetricError(ValueError):
    """Raised when the formula display builder receives a variable bag it does not know"""
