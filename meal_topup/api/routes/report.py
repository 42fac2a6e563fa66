"""GET / - meal account top-up report endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from meal_topup.api.routes.schemas import BalanceReportResponse, ErrorResponse
from meal_topup.api.dependencies import get_report_service, get_request_id
from meal_topup.domain.exceptions import ExtractionError, PortalError
from meal_topup.services.report import ReportService
from meal_topup.infrastructure.observability.metrics import record_report, record_report_failure
from meal_topup.infrastructure.observability.logging import log_report

router = APIRouter()

BALANCE_UNAVAILABLE = "Could not obtain account balance"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.get(
    "/",
    response_model=BalanceReportResponse,
    responses={503: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_report(
    request: Request,
    report_service: ReportService = Depends(get_report_service),
):
    """
    Report how much to top up before the next payday.

    Flow:
    1. Resolve next payday (weekends and holidays move it earlier)
    2. Count weekdays until payday
    3. Log in to the account portal and read the balance
    4. Derive meals needed and top-up amount
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = await report_service.generate()

    except (PortalError, ExtractionError) as e:
        record_report_failure()
        logging.error(f"Balance fetch failed: {e}", extra={"request_id": request_id})
        return error_response(503, BALANCE_UNAVAILABLE)

    except Exception as e:
        record_report_failure()
        logging.exception(f"Unexpected error: {e}", extra={"request_id": request_id})
        return error_response(500, "Internal server error")

    report = result.report
    duration_ms = (time.time() - start_time) * 1000
    record_report(report.weekdays_until_payday, report.topup_needed)
    log_report(request_id, result.payday, report.weekdays_until_payday, report.topup_needed, duration_ms)

    return BalanceReportResponse.from_report(report)
