import os

from pydantic import BaseModel, Field

ENV_PREFIX = "SEQOPS_"


class Settings(BaseModel):
    ENABLE_X64: bool = True
    LOG_LEVEL: str = "WARNING"
    ROUNDTRIP_RTOL: float = Field(default=1e-9, gt=0)

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``SEQOPS_*`` environment variables.

        Unset variables fall back to the field defaults; values are parsed and
        validated by pydantic (e.g. ``SEQOPS_ENABLE_X64=0`` disables x64).
        """
        overrides = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name}")
            if raw is not None:
                overrides[name] = raw
        return cls(**overrides)


settings = Settings.load()
