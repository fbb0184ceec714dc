from enum import Enum


class ErrorPolicy(str, Enum):
    """What a tracker does with a store failure while recording a session."""

    SUPPRESS = "suppress"
    PROPAGATE = "propagate"

    @classmethod
    def from_flag(cls, propagate_exceptions: bool) -> "ErrorPolicy":
        """Map the boolean ``propagate_exceptions`` option onto a policy."""
        return cls.PROPAGATE if propagate_exceptions else cls.SUPPRESS

    @property
    def propagates(self) -> bool:
        return self is ErrorPolicy.PROPAGATE
