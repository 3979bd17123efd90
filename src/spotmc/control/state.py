from dataclasses import dataclass
from enum import Enum


class ServerState(str, Enum):
    RUNNING = "Running"
    STOPPED = "Stopped"

    @classmethod
    def from_status(cls, status: str) -> "ServerState":
        """Anything other than "Running" means the server should be off."""
        return cls.RUNNING if status == cls.RUNNING.value else cls.STOPPED


@dataclass(frozen=True)
class CapacityTarget:
    desired: int
    min: int
    max: int

    def __post_init__(self):
        if self.desired not in (0, 1):
            raise ValueError(f"desired capacity must be 0 or 1, got {self.desired}")


def capacity_target(state: ServerState, bounds: str = "pinned") -> CapacityTarget:
    """Running -> 1, Stopped -> 0.

    "pinned" holds min and max at the desired count. "elastic" keeps the
    fleet at min=0, max=1 so an instance can terminate on its own.
    """
    desired = 1 if state is ServerState.RUNNING else 0
    if bounds == "elastic":
        return CapacityTarget(desired=desired, min=0, max=1)
    return CapacityTarget(desired=desired, min=desired, max=desired)
