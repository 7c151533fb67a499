import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    CouponNotFoundError,
    CouponUnavailableError,
    InvalidBookingError,
    ReservationNotFoundError,
    ReservationStateError,
)

logger = logging.getLogger(__name__)


async def invalid_booking_error_handler(_request: Request, exc: InvalidBookingError) -> JSONResponse:
    logger.warning("Invalid booking: %s (field=%s)", exc.message, exc.field)
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "field": exc.field},
    )


async def reservation_not_found_handler(_request: Request, exc: ReservationNotFoundError) -> JSONResponse:
    logger.info("Reservation lookup failed: %s", exc.reservation_id)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.message},
    )


async def reservation_state_error_handler(_request: Request, exc: ReservationStateError) -> JSONResponse:
    logger.warning("Reservation state conflict: %s (status=%s)", exc.message, exc.status)
    return JSONResponse(
        status_code=409,
        content={"detail": exc.message},
    )


async def coupon_not_found_handler(_request: Request, exc: CouponNotFoundError) -> JSONResponse:
    logger.info("Coupon lookup failed: %s", exc.code)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.message},
    )


async def coupon_unavailable_handler(_request: Request, exc: CouponUnavailableError) -> JSONResponse:
    logger.warning("Coupon %s unavailable: %s", exc.code, exc.message)
    return JSONResponse(
        status_code=409,
        content={"detail": exc.message},
    )
