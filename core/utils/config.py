from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    SERVICE_NAME: str = "BusinessGoalEngine"
    CURRENCY_SYMBOL: str = "₦"
    # Days before a deadline at which a goal starts counting as urgent
    URGENCY_WINDOW_DAYS: int = 14
    # Average rating goals over rated entries only instead of every entry
    RATING_AVERAGE_RATED_ONLY: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BIZDASH_",
        extra="allow",
    )


def get_setting():
    return Settings()
