import holidays
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = "INFO"
    currency: str = "TRY"
    tax_rate: float = 0.18
    service_fee_rate: float = 0.03
    service_fee_cap: float = 100.0
    quote_validity_hours: int = 24
    payment_success_rate: float = 0.95
    max_reservations: int = 1000
    event_holiday_country: str = ""

    @field_validator("event_holiday_country")
    @classmethod
    def _supported_holiday_country(cls, value: str) -> str:
        value = value.strip().upper()
        if value and value not in holidays.list_supported_countries():
            raise ValueError(f"Unsupported holiday country: {value}")
        return value
