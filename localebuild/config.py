"""Global configuration singleton for localebuild.

Reads settings from environment variables by default (a ``.env`` file is
loaded by the CLI before the first read).  When driven from Python, the
caller can populate the singleton before starting a build so that values
don't have to live in the process environment.

    from localebuild.config import settings
    settings.LOCALEBUILD_SOURCE_DIR = "frontend/src"
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from localebuild.report import ConfigurationError

DEFAULT_GLOBAL_NAME = "window._messages"
DEFAULT_VIEW_CONCURRENCY = 5

# Languages that are expected to fall back to English; no notice is logged.
DEFAULT_QUIET_FALLBACK = ("nb", "zh-cn")


class Settings:
    """Lightweight mutable config — one global instance."""

    LOCALEBUILD_SOURCE_DIR: Optional[str] = None
    LOCALEBUILD_LANGUAGES_FILE: Optional[str] = None
    LOCALEBUILD_GLOBAL_NAME: Optional[str] = None
    LOCALEBUILD_VIEW_CONCURRENCY: Optional[int] = None
    LOCALEBUILD_QUIET_FALLBACK: Optional[str] = None

    def get(self, name: str) -> Optional[str]:
        """Return the attribute value if set, otherwise fall back to env."""
        value = getattr(self, name, None)
        if value is not None:
            return value if not isinstance(value, int) else str(value)
        return os.getenv(name)

    def reset(self) -> None:
        for name in list(vars(self)):
            delattr(self, name)


settings = Settings()


@dataclass(frozen=True)
class BuildConfig:
    """Immutable snapshot of the settings for one build run."""

    source_dir: Path
    global_name: str = DEFAULT_GLOBAL_NAME
    view_concurrency: int = DEFAULT_VIEW_CONCURRENCY
    quiet_fallback: tuple[str, ...] = DEFAULT_QUIET_FALLBACK
    languages_file: Path | None = None

    @property
    def routes_file(self) -> Path:
        return self.source_dir / "routes.json"

    @property
    def general_file(self) -> Path:
        return self.source_dir / "l10n.json"

    @property
    def views_dir(self) -> Path:
        return self.source_dir / "views"


def load_config(source: Settings | None = None) -> BuildConfig:
    """Snapshot ``settings`` (or ``source``) into a :class:`BuildConfig`."""
    source = source or settings

    source_dir = Path(source.get("LOCALEBUILD_SOURCE_DIR") or "src").resolve()
    languages_file = source.get("LOCALEBUILD_LANGUAGES_FILE")
    concurrency = source.get("LOCALEBUILD_VIEW_CONCURRENCY")
    quiet = source.get("LOCALEBUILD_QUIET_FALLBACK")

    view_concurrency = DEFAULT_VIEW_CONCURRENCY
    if concurrency:
        try:
            view_concurrency = max(1, int(concurrency))
        except ValueError:
            raise ConfigurationError(
                f"LOCALEBUILD_VIEW_CONCURRENCY must be an integer, got {concurrency!r}"
            ) from None

    return BuildConfig(
        source_dir=source_dir,
        global_name=source.get("LOCALEBUILD_GLOBAL_NAME") or DEFAULT_GLOBAL_NAME,
        view_concurrency=view_concurrency,
        quiet_fallback=(
            tuple(code.strip() for code in quiet.split(",") if code.strip())
            if quiet is not None else DEFAULT_QUIET_FALLBACK
        ),
        languages_file=Path(languages_file).resolve() if languages_file else None,
    )
