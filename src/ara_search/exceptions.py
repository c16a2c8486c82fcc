"""
Custom exception hierarchy for ara_search.

All exceptions inherit from AraSearchError base class.
"""


class AraSearchError(Exception):
    """Base exception for all ara_search errors"""
    pass


class FixtureLoadError(AraSearchError):
    """Error reading or validating a fixture collection"""
    pass


class ConfigurationError(AraSearchError):
    """Error in surface or engine configuration"""
    pass


class RecordNotFoundError(AraSearchError):
    """Explicit lookup of a record id that is not in the corpus"""

    def __init__(self, record_id: str, kind: str = "record"):
        self.record_id = record_id
        self.kind = kind
        super().__init__(f"No {kind} found for ID '{record_id}'.")
