"""
Service configuration, loaded from a JSON file.
"""

import json
import logging
from typing import Any, Dict

from .errors import ConfigError

METHODS = ("GET", "POST")


class ServiceConfig:
    endpoint = ""
    api_version = ""
    method = "POST"
    loglevel = "INFO"

    def __init__(self, **kwargs):
        for key, val in kwargs.items():
            setattr(self, key, val)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "ServiceConfig":
        for key in ("endpoint", "api_version"):
            if not cfg.get(key):
                raise ConfigError(f'"{key}" is required')

        method = str(cfg.get("method", "POST")).upper()
        if method not in METHODS:
            raise ConfigError(f'Unknown method "{method}"')

        loglevel = str(cfg.get("loglevel", "INFO")).upper()
        if not isinstance(logging.getLevelName(loglevel), int):
            raise ConfigError(f'Unknown loglevel "{loglevel}"')

        return ServiceConfig(
            endpoint=cfg["endpoint"],
            api_version=cfg["api_version"],
            method=method,
            loglevel=loglevel,
        )

    @classmethod
    def load(cls, path: str) -> "ServiceConfig":
        with open(path, "r", encoding="utf-8") as f:
            cfg = json.load(f)
        if not isinstance(cfg, dict):
            raise ConfigError(f"{path}: expected a JSON object")
        return cls.from_dict(cfg)

    def logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(self.loglevel)
        return logger
