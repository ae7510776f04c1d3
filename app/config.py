from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Dad Jokes API"
    joke_api_url: str = "https://icanhazdadjoke.com/"
    # icanhazdadjoke asks clients to identify themselves
    user_agent: str = "dad-jokes-api (https://github.com/dad-jokes/dad-jokes-api)"
    # Favorites live in one file under an app-private directory
    data_dir: Path = Path.home() / ".dadjokes"
    favorites_label: str = "savedFavourites"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def favorites_path(self) -> Path:
        return self.data_dir / self.favorites_label


settings = Settings()
