from urllib.parse import urlsplit

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CUBESHEETS_")

    app_name: str = "CubeSheets"

    cube_cobra_url: str = "https://cubecobra.com"

    # Passed straight to httpx; the package defines no retry policy of its own
    request_timeout: float = 30.0
    user_agent: str = "CubeSheets/1.0"

    @property
    def cube_cobra_host(self) -> str:
        """Host part of the Cube Cobra base URL (e.g. ``cubecobra.com``)."""
        return urlsplit(self.cube_cobra_url).netloc


settings = Settings()
