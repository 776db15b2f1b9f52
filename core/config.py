from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

# Python 3.11 has tomllib; fall back to toml if needed
try:
    import tomllib  # type: ignore
    _BINARY = True
except ImportError:  # pragma: no cover
    import toml as tomllib  # type: ignore
    _BINARY = False

from core.exceptions import ConfigError
from core.types import ProtocolId

# config key → protocol, in catalog order
MODULE_KEYS: Dict[str, ProtocolId] = {
    "fried": ProtocolId.FRIED,
    "tug": ProtocolId.TUG,
    "chair_stand": ProtocolId.CHAIR_STAND,
    "arm_curl": ProtocolId.ARM_CURL,
    "sit_reach": ProtocolId.SIT_REACH,
    "gds15": ProtocolId.GDS15,
    "meem": ProtocolId.MEEM,
    "berg": ProtocolId.BERG,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class IntegrationSettings:
    # consumed by collaborators outside the scoring core (tutor chat, install guide)
    tutor_api_key: str = ""
    install_video_url: str = ""


@dataclass(frozen=True)
class Settings:
    app_name: str = "Especial Senior"
    tagline: str = "Sistema de Avaliação Funcional"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    modules: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    integrations: IntegrationSettings = field(default_factory=IntegrationSettings)

    def enabled_modules(self) -> List[str]:
        """Module keys that are enabled, sorted by their `order` (then catalog order)."""
        keys = list(MODULE_KEYS)
        rows = []
        for i, key in enumerate(keys):
            cfg = self.modules.get(key, {})
            if cfg.get("enabled", True):
                rows.append((cfg.get("order", 999), i, key))
        return [key for _, _, key in sorted(rows)]

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any], path: str = "config.toml") -> "Settings":
        app = cfg.get("app", {})
        log = cfg.get("logging", {})
        mods = cfg.get("modules", {})
        integ = cfg.get("integrations", {})

        unknown = sorted(set(mods) - set(MODULE_KEYS))
        if unknown:
            raise ConfigError(f"Unknown assessment modules: {', '.join(unknown)}", path=path,
                              details={"unknown": unknown})
        for name, mod in mods.items():
            order = mod.get("order", 999)
            if isinstance(order, bool) or not isinstance(order, int):
                raise ConfigError(f"Module {name!r}: order must be an integer, got {order!r}", path=path,
                                  details={"module": name, "order": order})
        level = str(log.get("level", "INFO")).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log level {level!r}", path=path)

        return cls(
            app_name=app.get("name", cls.app_name),
            tagline=app.get("tagline", cls.tagline),
            log_level=level,
            log_file=log.get("file") or None,
            modules={k: dict(v) for k, v in mods.items()},
            integrations=IntegrationSettings(
                tutor_api_key=integ.get("tutor_api_key", ""),
                install_video_url=integ.get("install_video_url", ""),
            ),
        )

    @classmethod
    def load(cls, path: Union[str, Path] = "config.toml") -> "Settings":
        p = Path(path)
        if not p.exists():
            return cls()
        try:
            if _BINARY:
                with open(p, "rb") as f:
                    cfg = tomllib.load(f)
            else:  # pragma: no cover
                with open(p, "r", encoding="utf-8") as f:
                    cfg = tomllib.load(f)
        except Exception as exc:
            raise ConfigError(f"Could not parse {p}: {exc}", path=str(p)) from exc
        return cls.from_dict(cfg, path=str(p))
