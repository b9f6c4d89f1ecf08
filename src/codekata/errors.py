"""Exception types."""


class CodeKataError(Exception):
    """Base class for application errors."""


class StorageError(CodeKataError):
    """The challenge store could not complete an operation."""


class ChallengeNotFoundError(CodeKataError):
    """No challenge exists with the requested id."""

    def __init__(self, challenge_id: str):
        self.challenge_id = challenge_id
        super().__init__(f"Challenge not found: {challenge_id}")


class DuplicateChallengeError(StorageError):
    """A challenge with the same id is already stored."""

    def __init__(self, challenge_id: str):
        self.challenge_id = challenge_id
        super().__init__(f"Challenge already exists: {challenge_id}")


class EmptySolutionError(CodeKataError):
    """A submission was rejected because the solution text was blank."""
