"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(app_name="Shop", env="development")

    or read the deployment values from the process environment::

        config = AppConfig.from_env()
    """

    # Application identity (exposed to every template)
    app_url: str = ""
    app_name: str = ""
    env: str = "production"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Templates
    views_dir: str | Path = "views"
    not_found_template: str = "errors/404.html"
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Routing
    default_controller: str = "Homepages"
    default_method: str = "index"
    catch_all: str = "show"
    alias: str = "show"

    @property
    def is_dev(self) -> bool:
        """True when the environment flag selects development display mode."""
        return self.env == "development"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> AppConfig:
        """Build a config from ``APP_URL``, ``APP_NAME`` and ``APP_ENV``.

        Missing variables keep the field defaults. Keyword overrides win
        over the environment.
        """
        source = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if "APP_URL" in source:
            values["app_url"] = source["APP_URL"]
        if "APP_NAME" in source:
            values["app_name"] = source["APP_NAME"]
        if "APP_ENV" in source:
            values["env"] = source["APP_ENV"]
        values.update(overrides)
        return cls(**values)
