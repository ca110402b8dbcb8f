from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    APP_NAME: str = "Fish Auction"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    LOG_LEVEL: str = "INFO"

    # Money display (all amounts are stored as integer centavos)
    CURRENCY_SYMBOL: str = "₱"

    # Settlement policy: 600 bps = 6% commission, 2500 centavos = ₱25.00 labor fee
    COMMISSION_RATE_BPS: int = 600
    LABOR_FEE_CENTS: int = 2500

    # Auction scheduling defaults
    AUCTION_DURATION_MINUTES: int = 480  # 8 hours
    DEFAULT_BID_INCREMENT_CENTS: int = 500
    START_PRICE_RESERVE_PCT: int = 80  # start price = 80% of reserve price
    START_PRICE_PER_KG_CENTS: int = 1000  # fallback when the lot has no reserve


settings = Settings()
