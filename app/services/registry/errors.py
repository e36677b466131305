"""Registry domain errors."""


class MemberNotFoundError(Exception):
    """No member at the given id or index."""

    def __init__(self, key: str | int):
        self.key = key
        self.message = f"Member not found: {key!r}"
        super().__init__(self.message)


class SnapshotError(Exception):
    """Stored snapshot could not be parsed into members."""

    def __init__(self, message: str = "Malformed member snapshot"):
        self.message = message
        super().__init__(self.message)
