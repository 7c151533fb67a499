class InvalidBookingError(Exception):
    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class ReservationNotFoundError(Exception):
    def __init__(self, reservation_id: str):
        self.reservation_id = reservation_id
        self.message = f"Reservation {reservation_id} not found"
        super().__init__(self.message)


class ReservationStateError(Exception):
    def __init__(self, message: str, status: str | None = None):
        self.message = message
        self.status = status
        super().__init__(message)


class CouponNotFoundError(Exception):
    def __init__(self, code: str):
        self.code = code
        self.message = f"Coupon {code} not found"
        super().__init__(self.message)


class PaymentError(Exception):
    """Raised inside the payment simulator; never escapes process_payment."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CouponUnavailableError(Exception):
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)
