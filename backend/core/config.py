import os



def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", "1440"))

# Accounts provisioned without a password may sign in with DEFAULT_PASSWORD.
ALLOW_DEFAULT_PASSWORD = _get_bool(os.getenv("ALLOW_DEFAULT_PASSWORD"), default=True)
DEFAULT_PASSWORD = os.getenv("DEFAULT_PASSWORD", "123456")

CONTENT_STORE_PATH = os.getenv("CONTENT_STORE_PATH", "./content_store.json")

CORS_ALLOW_ORIGINS = _get_list(
    os.getenv("CORS_ALLOW_ORIGINS"),
    ["http://localhost:5173", "http://localhost:8080"],
)

def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and JWT_SECRET_KEY == "change-me":
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")
    if APP_ENV.lower() == "production" and ALLOW_DEFAULT_PASSWORD:
        raise RuntimeError("ALLOW_DEFAULT_PASSWORD must be disabled in production.")
