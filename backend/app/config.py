from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import FrozenSet
from functools import cached_property, lru_cache


class Settings(BaseSettings):
    # Application Settings
    APP_NAME: str = "KursusKu API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    @property
    def debug(self) -> bool:
        return self.DEBUG

    # API Settings
    API_PREFIX: str = "/api"

    # Supabase Configuration
    SUPABASE_URL: str
    SUPABASE_ANON_KEY: str
    SUPABASE_SERVICE_ROLE_KEY: str

    @property
    def supabase_url(self) -> str:
        return self.SUPABASE_URL

    @property
    def supabase_anon_key(self) -> str:
        return self.SUPABASE_ANON_KEY

    @property
    def supabase_service_role_key(self) -> str:
        return self.SUPABASE_SERVICE_ROLE_KEY

    # CORS Settings
    FRONTEND_ORIGIN: str = "*"

    # TrueType fonts for certificate text; Helvetica is used when missing
    CERTIFICATE_FONT_PATH: str = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
    CERTIFICATE_BOLD_FONT_PATH: str = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"

    # Comma-separated list of admin email addresses
    ADMIN_EMAILS: str = ""

    @cached_property
    def admin_emails(self) -> FrozenSet[str]:
        return frozenset(
            email.strip().lower()
            for email in self.ADMIN_EMAILS.split(",")
            if email.strip()
        )

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @property
    def host(self) -> str:
        return self.HOST

    @property
    def port(self) -> int:
        return self.PORT

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
