"""Exception hierarchy for kuchikomi."""


class KuchikomiError(Exception):
    """Base exception for all kuchikomi errors."""


class MalformedPatternTableError(KuchikomiError):
    """Raised when an NG pattern table cannot be loaded or compiled.

    Always raised for the table as a whole; a partially loaded table is
    never returned.
    """

    def __init__(self, message: str, pattern_id: str = "") -> None:
        super().__init__(message)
        self.pattern_id = pattern_id
