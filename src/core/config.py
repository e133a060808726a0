"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El host y la API key se pasan explícitamente a los clientes; no hay
  singletons ni carga perezosa global.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import set_key
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigurationError

APP_DIR_NAME = "octo-dispatch"
_USER_ENV_HEADER = "# octo-dispatch user config (.env)\n"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario.

    Un agente de CI guarda host/API key una sola vez aquí en lugar de repetir
    un `.env` en cada workspace. Windows usa `%APPDATA%`, macOS
    `Application Support` y el resto sigue XDG.
    """

    home = Path.home()
    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or home)
    elif sys.platform == "darwin":
        root = home / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza claves en el `.env` del usuario.

    Usa python-dotenv (el mismo parser que pydantic-settings usa al leer), así
    que comentarios y claves ajenas se conservan en su sitio.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text(_USER_ENV_HEADER, encoding="utf-8")

    for key, value in values.items():
        if value is None:
            continue
        set_key(env_path, key, value, quote_mode="never")
    return env_path


class OctopusSettings(BaseSettings):
    """Configuración de conexión al servidor Octopus Deploy.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - El valor resultante es inmutable y se inyecta en el constructor del
      cliente HTTP.
    """

    model_config = SettingsConfigDict(
        env_prefix="OCTO_DISPATCH_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    octopus_host: str | None = Field(
        default=None,
        description="URL base del servidor Octopus (p.ej. https://octopus.example.com).",
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="API key enviada en la cabecera X-Octopus-ApiKey.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="octo-dispatch/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )

    @field_validator("octopus_host")
    @classmethod
    def _strip_host(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().rstrip("/")
        return value or None

    def require_connection(self) -> tuple[str, str]:
        """Devuelve `(host, api_key)` o falla si falta alguno."""

        if not self.octopus_host:
            raise ConfigurationError(
                "Octopus host is not configured (set OCTO_DISPATCH_OCTOPUS_HOST)."
            )
        key = self.api_key.get_secret_value().strip() if self.api_key else ""
        if not key:
            raise ConfigurationError(
                "Octopus API key is not configured (set OCTO_DISPATCH_API_KEY)."
            )
        return self.octopus_host, key
