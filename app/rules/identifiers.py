"""Reference codes for reservations, payments and refunds."""

import secrets
import time

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"

CONFIRMATION_PREFIX = "TA"


def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def random_base36(length: int) -> str:
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def _now_ms() -> int:
    return int(time.time() * 1000)


def confirmation_code() -> str:
    """Return TA-<base36 ms timestamp>-<4 random chars>, upper case."""
    return f"{CONFIRMATION_PREFIX}-{to_base36(_now_ms()).upper()}-{random_base36(4).upper()}"


def reservation_id() -> str:
    return f"RES-{_now_ms()}-{random_base36(6)}"


def transaction_id() -> str:
    return f"TXN-{_now_ms()}-{random_base36(6).upper()}"


def refund_id() -> str:
    return f"RFD-{_now_ms()}-{random_base36(6).upper()}"


def auth_code() -> str:
    return random_base36(6).upper()
