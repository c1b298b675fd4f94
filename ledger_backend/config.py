# ledger_backend/config.py
import os
from dataclasses import dataclass, asdict
from datetime import timedelta

DEFAULT_DB_PATH = os.path.join("data", "ledger.db")


def _flag(value):
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup."""

    jwt_secret_key: str
    db_path: str = DEFAULT_DB_PATH
    jwt_expires_minutes: int = 1440
    cors_origins: tuple = ("http://localhost:3000",)
    password_hash_method: str = "scrypt"
    protect_all_transaction_routes: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    testing: bool = False

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        testing = _flag(env.get("TESTING", "false"))

        secret = env.get("JWT_SECRET_KEY")
        if not secret:
            if not testing:
                raise ValueError("JWT_SECRET_KEY environment variable must be set")
            secret = "testing-only-secret-not-for-production-use"

        cors_origins = env.get("CORS_ORIGINS", "http://localhost:3000")
        return cls(
            jwt_secret_key=secret,
            db_path=env.get("DB_PATH", DEFAULT_DB_PATH),
            jwt_expires_minutes=int(env.get("JWT_EXPIRES_MINUTES", "1440")),
            cors_origins=tuple(o.strip() for o in cors_origins.split(",") if o.strip()),
            password_hash_method=env.get("PASSWORD_HASH_METHOD", "scrypt"),
            protect_all_transaction_routes=_flag(env.get("PROTECT_ALL_TRANSACTION_ROUTES", "false")),
            host=env.get("HOST", "0.0.0.0"),
            port=int(env.get("PORT", "3000")),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            testing=testing,
        )

    def flask_config(self):
        """Map settings onto the Flask / flask_jwt_extended config keys."""
        expires = timedelta(minutes=self.jwt_expires_minutes) if self.jwt_expires_minutes > 0 else False
        return {
            "JWT_SECRET_KEY": self.jwt_secret_key,
            "JWT_ALGORITHM": "HS256",
            "JWT_TOKEN_LOCATION": ["headers"],
            "JWT_HEADER_NAME": "Authorization",
            "JWT_HEADER_TYPE": "Bearer",
            "JWT_ACCESS_TOKEN_EXPIRES": expires,
            "PASSWORD_HASH_METHOD": self.password_hash_method,
            "PROTECT_ALL_TRANSACTION_ROUTES": self.protect_all_transaction_routes,
            "TESTING": self.testing,
        }

    def as_dict(self):
        data = asdict(self)
        data["jwt_secret_key"] = "***"
        return data
