from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_TITLE: str = "Restaurant Orders"
    LOG_LEVEL: str = "INFO"

    # Ставки начисляются на сумму после скидки
    TAX_RATE: Decimal = Decimal("0.10")
    SERVICE_RATE: Decimal = Decimal("0.05")
    CURRENCY: str = "MAD"

    class Config:
        env_file = ".env"

settings = Settings()
