from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

from lapstats.core.constants import SplitUnit


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_assignment=True)

    # Timezone activity start times are normalised to.
    # Examples: "America/New_York", "Europe/London", or "local" to use system tz.
    timezone: str = "local"

    log_level: str = "INFO"

    # Split unit used by the API when none is given: "k" or "m"
    default_split_unit: SplitUnit = SplitUnit.mile

    @field_validator("timezone", mode="before")
    @classmethod
    def _empty_to_local(cls, v):
        if v in ("", None, "null", "None"):
            return "local"
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return str(v).upper() if v else "INFO"


settings = Settings()
