"""General strings shared by every view.

Reads ``<localizations>/scratch-website.general-l10njson/<lang>.json`` for
each supported language.  English comes from the application's own
``l10n.json`` baseline, and any language without a file gets the English
table as-is.
"""

import json
import logging
from pathlib import Path

from localebuild.languages import FALLBACK_LANGUAGE
from localebuild.report import ConfigurationError

logger = logging.getLogger("localebuild.general")

GENERAL_RESOURCE = "general"

MessageTable = dict[str, str]


def resource_dir(localizations_dir: Path, resource: str) -> Path:
    return Path(localizations_dir) / f"scratch-website.{resource}-l10njson"


def _load_json(path: Path) -> dict:
    # bytes let json detect the encoding and skip a UTF-8 BOM
    data = json.loads(Path(path).read_bytes())
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


def load_baseline(path: Path) -> MessageTable:
    """Load the English baseline; every fallback starts here."""
    try:
        return _load_json(path)
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Could not load English baseline {path}: {exc}") from exc


def resolve_general_locales(
    languages: list[str],
    localizations_dir: Path,
    baseline: MessageTable,
) -> dict[str, MessageTable]:
    """Build ``language code -> message table`` for the general strings."""
    general: dict[str, MessageTable] = {FALLBACK_LANGUAGE: baseline}
    translations = resource_dir(localizations_dir, GENERAL_RESOURCE)

    for code in languages:
        if code == FALLBACK_LANGUAGE:
            continue
        path = translations / f"{code}.json"
        try:
            general[code] = _load_json(path)
        except FileNotFoundError:
            logger.debug("No general translations for %s, using English", code)
            general[code] = baseline
        except ValueError as exc:
            raise ConfigurationError(f"Could not parse general translations {path}: {exc}") from exc

    return general
