"""Tagged results for flow execution."""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class FlowStatus(str, Enum):
    """Outcome of a flow execution."""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class FlowErrorKind(str, Enum):
    """Why a flow execution failed."""

    INVALID_INPUT = "invalid_input"
    PROVIDER_FAILURE = "provider_failure"
    EMPTY_RESPONSE = "empty_response"
    SCHEMA_MISMATCH = "schema_mismatch"


class FlowResult(BaseModel, Generic[T]):
    """Either ``ok(data)`` or ``err(kind, detail)``.

    Callers branch on ``is_ok`` (or ``status``) instead of testing the
    returned data for truthiness.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    flow_name: str = Field(..., description="Name of the flow that produced this result")
    status: FlowStatus = Field(..., description="Execution outcome")
    data: T | None = Field(default=None, description="Validated output when successful")
    error_kind: FlowErrorKind | None = Field(default=None, description="Failure kind when unsuccessful")
    error: str | None = Field(default=None, description="Human-readable failure detail")
    exception: BaseException | None = Field(default=None, exclude=True, description="Original exception")

    @classmethod
    def ok(cls, flow_name: str, data: T) -> "FlowResult[T]":
        return cls(flow_name=flow_name, status=FlowStatus.SUCCESS, data=data)

    @classmethod
    def err(
        cls, flow_name: str, kind: FlowErrorKind, detail: str, exception: BaseException | None = None
    ) -> "FlowResult[Any]":
        return cls(flow_name=flow_name, status=FlowStatus.ERROR, error_kind=kind, error=detail, exception=exception)

    @property
    def is_ok(self) -> bool:
        return self.status == FlowStatus.SUCCESS

    @property
    def is_err(self) -> bool:
        return self.status == FlowStatus.ERROR

    def unwrap(self) -> T:
        """Return the data of a successful result, or raise the failure.

        Raises:
            The original exception of a failed result, or RuntimeError when none was kept
        """
        if self.is_ok:
            return self.data  # type: ignore[return-value]
        if self.exception is not None:
            raise self.exception
        raise RuntimeError(f"Flow '{self.flow_name}' failed ({self.error_kind}): {self.error}")
