from __future__ import annotations
from pydantic import BaseModel, Field
import os

class AppConfig(BaseModel):
    log_level: str = "WARNING"
    summary_precision: int = Field(3, ge=0)

def load_config() -> AppConfig:
    """Build settings from STOPWATCH_* env vars; bad values raise ValidationError."""
    return AppConfig(
        log_level=os.getenv('STOPWATCH_LOG_LEVEL', 'WARNING').upper(),
        summary_precision=os.getenv('STOPWATCH_SUMMARY_PRECISION', '3'),
    )
