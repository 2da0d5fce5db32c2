from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WARD_CAPACITIES = {"ICU": 5, "General": 10, "Pediatric": 8, "Emergency": 3}
DEFAULT_WARD_RATES = {
    "ICU": 5000.0,
    "General": 2000.0,
    "Pediatric": 2500.0,
    "Emergency": 8000.0,
}


class Settings(BaseSettings):
    data_dir: Path = Path(".")
    patients_file: str = "patients.csv"
    rates_file: str = "rates.cfg"
    report_file: str = "billing_report.txt"
    ward_capacities: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_WARD_CAPACITIES)
    )
    ward_rates: dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_WARD_RATES)
    )
    discount_percentage: float = 0.0
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="WARDBOOK_",
        env_file=(
            Path("~/.wardbook/env").expanduser(),
            ".env",
        ),
        extra="ignore",
    )


SETTINGS = Settings()
