from dataclasses import dataclass
from pathlib import Path

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

_DEFAULTS: dict[str, object] = {
    "database": {
        "path": "~/.config/ffm/league.db",
        "pool_size": 5,
    },
    "server": {
        "host": "127.0.0.1",
        "port": 5000,
        "debug": False,
    },
}

_TRUTHY = {"1", "true", "yes", "on"}


def create_config(
    yaml_path: str = "ffm.yaml",
    env_prefix: str = "FFM",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.
    Environment variables use ``__`` as the nesting separator, so
    ``FFM__DATABASE__PATH`` sets ``database.path``.
    """
    if defaults is None:
        defaults = _DEFAULTS

    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


@dataclass(frozen=True)
class AppSettings:
    db_path: Path
    pool_size: int
    host: str
    port: int
    debug: bool


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_app_settings(cfg: ConfigurationSet | None = None) -> AppSettings:
    if cfg is None:
        cfg = create_config()
    pool_size = int(str(cfg["database.pool_size"]))
    if pool_size < 1:
        raise ValueError(f"database.pool_size must be at least 1, got {pool_size}")
    return AppSettings(
        db_path=Path(str(cfg["database.path"])).expanduser(),
        pool_size=pool_size,
        host=str(cfg["server.host"]),
        port=int(str(cfg["server.port"])),
        debug=_as_bool(cfg["server.debug"]),
    )
