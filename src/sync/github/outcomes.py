from enum import Enum


class DispatchOutcome(Enum):
    """dispatch 결과 -> (HTTP status, response text)"""

    SAVED = (200, "Repository info saved!")
    UPDATED = (200, "Repository info updated!")
    DELETED = (200, "Repository deleted from DB!")
    IGNORED = (200, "Ignored")
    MALFORMED = (400, "Malformed JSON")
    PERSISTENCE_FAILURE = (500, "Internal server error")

    @property
    def status_code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]
