from dataclasses import dataclass, field
from enum import Enum

from botocore.exceptions import BotoCoreError, ClientError


class FaultKind(str, Enum):
    MALFORMED_EVENT = "malformed-event"
    EXTERNAL_CALL = "external-call"


@dataclass(frozen=True)
class Fault:
    kind: FaultKind
    action: str
    message: str
    code: str = ""

    @classmethod
    def from_exception(cls, action: str, exc: Exception) -> "Fault":
        code = ""
        if isinstance(exc, ClientError):
            code = exc.response.get("Error", {}).get("Code", "")
        return cls(kind=FaultKind.EXTERNAL_CALL, action=action, message=str(exc), code=code)


@dataclass
class InvocationResult:
    """What one handler invocation did.

    calls lists the external writes/lookups that succeeded, skipped the
    actions suppressed by missing configuration or data, faults everything
    that went wrong.
    """

    ack: str = ""
    calls: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    faults: list[Fault] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.faults


EXTERNAL_ERRORS = (ClientError, BotoCoreError)


class InvocationFailed(RuntimeError):
    def __init__(self, result: InvocationResult):
        self.result = result
        summary = "; ".join(
            f"{f.action}: {f.code or f.kind.value}: {f.message}" for f in result.faults
        )
        super().__init__(f"Invocation failed with {len(result.faults)} fault(s): {summary}")
