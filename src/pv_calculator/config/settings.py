"""
Centralized settings and form defaults for the PV calculator.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from ..engine.models import PricingParameters

ENV_PREFIX = "PV_CALC_"


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 4 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def _env(name: str) -> Optional[str]:
    value = os.environ.get(f"{ENV_PREFIX}{name}")
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_pv_values(raw: str) -> tuple:
    """Parse a comma separated list such as '0, 500000, 800000'."""
    return tuple(float(v) for v in raw.split(',') if v.strip())


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    project_root: Path

    # Form defaults
    client_name: str = "Иван"
    car_model: str = "Toyota Camry"
    car_price: float = 6_500_000
    deposit: float = 200_000
    rate_at_zero: float = 3_900
    diff_under_15: float = 200
    days_in_month: float = 30.5
    months: int = 55
    pv_values: tuple = (0, 500_000, 800_000, 1_000_000)

    log_level: str = "INFO"

    # Launchers
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    ui_port: int = 8501

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings, applying PV_CALC_* environment overrides."""
        settings = cls(project_root=project_root or get_project_root())

        for name in ('car_price', 'deposit', 'rate_at_zero', 'diff_under_15', 'days_in_month'):
            raw = _env(name.upper())
            if raw is not None:
                setattr(settings, name, float(raw))

        raw = _env('MONTHS')
        if raw is not None:
            settings.months = int(raw)

        raw = _env('PV_VALUES')
        if raw is not None:
            settings.pv_values = _parse_pv_values(raw)

        for name in ('client_name', 'car_model'):
            raw = _env(name.upper())
            if raw is not None:
                setattr(settings, name, raw)

        raw = _env('LOG_LEVEL')
        if raw is not None:
            settings.log_level = raw.upper()

        raw = _env('API_HOST')
        if raw is not None:
            settings.api_host = raw

        for name in ('api_port', 'ui_port'):
            raw = _env(name.upper())
            if raw is not None:
                setattr(settings, name, int(raw))

        return settings

    def default_parameters(self) -> PricingParameters:
        """Pricing parameters pre-filled in the form."""
        return PricingParameters(
            car_price=self.car_price,
            deposit=self.deposit,
            rate_at_zero=self.rate_at_zero,
            diff_under_15=self.diff_under_15,
            days_in_month=self.days_in_month,
            months=self.months,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached instance so the next get_settings() reloads."""
    global _settings
    _settings = None
