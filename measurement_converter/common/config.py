"""Configuration management using Pydantic Settings"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration"""
    name: str = Field(default="measurement-converter", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class ConversionConfig(BaseSettings):
    """Conversion defaults"""
    default_precision: int = Field(default=4, ge=0, alias="DEFAULT_PRECISION")
    default_rounding_mode: str = Field(default="round", alias="DEFAULT_ROUNDING_MODE")
    max_suggestions: int = Field(default=3, ge=1, alias="MAX_SUGGESTIONS")
    similarity_threshold: float = Field(default=0.5, ge=0.0, lt=1.0, alias="SIMILARITY_THRESHOLD")

    @field_validator("default_rounding_mode")
    @classmethod
    def validate_rounding_mode(cls, v: str) -> str:
        valid_modes = ["round", "ceil", "floor"]
        if v.lower() not in valid_modes:
            raise ValueError(f"DEFAULT_ROUNDING_MODE must be one of {valid_modes}")
        return v.lower()

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Settings(BaseSettings):
    """Global settings"""
    app: AppConfig = Field(default_factory=AppConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Global settings instance
settings = Settings()
