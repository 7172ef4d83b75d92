from pydantic_settings import BaseSettings

from vpic_lookup import __version__


class Settings(BaseSettings):
    decode_base_url: str = "https://vpic.nhtsa.dot.gov/api/vehicles"
    recalls_base_url: str = "https://one.nhtsa.gov/webapi/api/Recalls/vehicle"

    minimum_year: int = 1950
    years_ahead: int = 2
    minimum_make_length: int = 3
    minimum_model_length: int = 3
    vin_length: int = 17

    timeout: float = 10.0
    max_redirects: int = 2
    user_agent: str = f"vpic-lookup/{__version__}"

    class Config:
        env_prefix = "VPIC_"
        env_file = ".env"
        extra = "ignore"
        frozen = True


settings = Settings()
