from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from logging import NullHandler, getLogger
from typing import Any

logger = getLogger("lavacharts")
logger.addHandler(NullHandler())

DEFAULT_JS_NAMESPACE = "google.visualization"

CONFIG_FILE_NAME = "lavacharts.toml"


class MagicConstants(Enum):
    MISSING = "missing"


MISSING = MagicConstants.MISSING


@dataclass
class Serialization:
    """Control how payloads are encoded"""

    indent: int | None = None
    sort_keys: bool = False


@dataclass
class Config:
    strict_options: bool = True
    js_namespace: str = DEFAULT_JS_NAMESPACE
    serialization: Serialization = field(default_factory=Serialization)

    @contextmanager
    def temporary(self, **kwargs: Any):
        """
        Context manager to temporarily set attributes and revert them afterwards.

        Usage:
            with CONFIG.temporary(strict_options=False):
                # unknown option keys pass through here
                build_chart()
            # strict_options is back to its original value
        """
        original_values = {key: getattr(self, key) for key in kwargs}

        for key, value in kwargs.items():
            setattr(self, key, value)

        try:
            yield self
        finally:
            for key, value in original_values.items():
                setattr(self, key, value)


CONFIG = Config()
