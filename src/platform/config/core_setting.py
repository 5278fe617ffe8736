from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Theater Seat Allocation'
    VERSION: str = '0.1.0'
    DEBUG: bool = False

    # Logging
    LOG_TO_FILE: bool = False  # File sink is always on in DEBUG mode
    LOG_TIMEZONE: str = 'Asia/Kolkata'

    # Block scoring (see BlockScorer)
    CENTER_SCORE_MAX: float = 100.0
    CENTER_DECAY_PER_SEAT: float = 8.0
    TOP_ROW_BIAS_MAX: float = 250.0
    BOTTOM_PENALTY_BASE: float = -500.0
    BOTTOM_PENALTY_STEP: float = -100.0  # Added per row beyond the base row
    BUFFER_WEIGHT: float = 2.0
    BUFFER_CAP: int = 5
    ORPHAN_PENALTY: float = 10.0
    AISLE_BONUS: float = 5.0

    # Seating chart
    CENTER_AISLE_BAND: float = 1 / 3  # Fraction of the row, centered, where a gap counts as the center aisle
    TIE_EPSILON: float = 1e-6

    @field_validator('CENTER_AISLE_BAND')
    @classmethod
    def validate_center_aisle_band(cls, v: float) -> float:
        if not 0 < v <= 1:
            raise ValueError('CENTER_AISLE_BAND must be in (0, 1]')
        return v

    @field_validator('BUFFER_CAP')
    @classmethod
    def validate_buffer_cap(cls, v: int) -> int:
        if v < 1:
            raise ValueError('BUFFER_CAP must be at least 1')
        return v

    @model_validator(mode='after')
    def validate_penalty_dominates_row_bias(self) -> 'Settings':
        if self.BOTTOM_PENALTY_BASE >= 0 or self.BOTTOM_PENALTY_STEP > 0:
            raise ValueError('Bottom penalty terms must be negative')
        if self.TOP_ROW_BIAS_MAX >= abs(self.BOTTOM_PENALTY_BASE):
            raise ValueError('TOP_ROW_BIAS_MAX must stay below |BOTTOM_PENALTY_BASE|')
        return self


settings = Settings()  # type: ignore
