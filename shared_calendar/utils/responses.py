"""
Standardized response utilities
"""

from typing import Any, List, Optional
from fastapi import status
from fastapi.responses import JSONResponse

from shared_calendar.schemas.common import StandardResponse, ErrorResponse
from shared_calendar.services.outcomes import Outcome, Reason

# HTTP status reported for each refusal reason
REASON_STATUS = {
    Reason.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Reason.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Reason.NOT_INVITED: status.HTTP_404_NOT_FOUND,
    Reason.ACCOUNT_EXISTS: status.HTTP_409_CONFLICT,
    Reason.EVENT_EXISTS: status.HTTP_409_CONFLICT,
    Reason.BUSY_ON_DATE: status.HTTP_409_CONFLICT,
    Reason.ALREADY_INVITED: status.HTTP_409_CONFLICT,
    Reason.ALREADY_RESPONDED: status.HTTP_409_CONFLICT,
    Reason.ALREADY_ATTENDING: status.HTTP_409_CONFLICT,
    Reason.GUEST_FORBIDDEN: status.HTTP_403_FORBIDDEN,
    Reason.STAFF_HIGH_FORBIDDEN: status.HTTP_403_FORBIDDEN,
    Reason.INVALID_TYPE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    Reason.INVALID_PRIORITY: status.HTTP_422_UNPROCESSABLE_ENTITY,
    Reason.INVALID_DATE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    Reason.INVALID_RESPONSE: status.HTTP_422_UNPROCESSABLE_ENTITY,
}

def success_response(
    message: str,
    data: Any = None,
    cascade: Optional[List[str]] = None,
    status_code: int = 200
) -> JSONResponse:
    """Create standardized success response"""
    response = StandardResponse(
        success=True,
        message=message,
        data=data,
        cascade=cascade or []
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

def error_response(
    message: str,
    error_code: Optional[str] = None,
    details: Any = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(
        message=message,
        error_code=error_code,
        details=details
    )
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

def outcome_response(
    outcome: Outcome,
    data: Any = None,
    status_code: int = 200
) -> JSONResponse:
    """Translate an engine outcome into a success or error response"""
    if outcome.ok:
        return success_response(
            message=outcome.message,
            data=outcome.data if data is None else data,
            cascade=[effect.describe() for effect in outcome.cascade],
            status_code=status_code
        )
    return error_response(
        message=outcome.message,
        error_code=outcome.reason.value,
        status_code=REASON_STATUS.get(outcome.reason, status.HTTP_400_BAD_REQUEST)
    )
