"""Turn domain results into HTTP responses, with metrics and logs"""

from typing import Any, TypeVar

from fastapi import HTTPException, Request

from empire_finance.api.dependencies import get_request_id
from empire_finance.domain.results import Result
from empire_finance.infrastructure.observability.logging import log_operation
from empire_finance.infrastructure.observability.metrics import record_operation

T = TypeVar("T")


def resolve(result: Result[T], request: Request, operation: str, **fields: Any) -> T:
    """
    Return the value of an accepted operation, or raise HTTP 422.

    The 422 detail is the failure's `to_dict()` payload: code, message,
    bound, actual and shortfall.
    """
    request_id = get_request_id(request)

    if result.ok:
        record_operation(operation, accepted=True)
        log_operation(request_id, operation, accepted=True, **fields)
        return result.value

    error = result.error
    record_operation(operation, accepted=False, reason=error.code)
    log_operation(request_id, operation, accepted=False, reason=error.code, **fields)
    raise HTTPException(status_code=422, detail=error.to_dict())
