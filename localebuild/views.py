"""View configuration derived from the application's route table.

Every non-redirect route becomes a view.  A view's default English
strings live next to its template as ``l10n.json``; localized asset URLs,
when it has any, live beside them as ``l10n-static.json``.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from pydantic import ValidationError

from localebuild.report import ConfigurationError
from localebuild.schemas import AssetTable, Route

logger = logging.getLogger("localebuild.views")

# Views whose resource on the localization platform is named differently.
RESOURCE_NAME_MAPPING: dict[str, str] = {
    "conference-index": "conference-index-2017",
    "conference-plan": "conference-plan-2017",
    "conference-schedule": "conference-schedule-2017",
    "conference-details": "conference-details-2017",
}

TEMPLATE_SUFFIX = ".jsx"


@dataclass
class ViewConfig:
    name: str
    view: str
    defaults: dict[str, str] | None = None
    assets: dict[str, dict[str, str]] | None = None
    resource: str = ""

    def __post_init__(self) -> None:
        if not self.resource:
            self.resource = self.name


def resource_name(view: str, mapping: dict[str, str] | None = None) -> str:
    mapping = RESOURCE_NAME_MAPPING if mapping is None else mapping
    return mapping.get(view) or view


def load_routes(path: Path) -> list[Route]:
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Could not load routes {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise ConfigurationError(f"Routes file {path} must hold a JSON list")
    try:
        return [Route.model_validate(entry) for entry in raw]
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid route in {path}: {exc}") from exc


def _view_dir(views_dir: Path, view: str) -> Path:
    parent = PurePosixPath(view).parent
    return views_dir.joinpath(*parent.parts)


def _read_optional_json(path: Path) -> Any | None:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return None
    except ValueError as exc:
        raise ConfigurationError(f"Could not parse {path}: {exc}") from exc


def load_view_defaults(views_dir: Path, route: Route) -> dict[str, str] | None:
    """Default English strings for a view, or None when the view has none.

    A view without ``l10n.json`` is fine as long as its template exists;
    a route pointing at neither is a misconfiguration.
    """
    view_dir = _view_dir(views_dir, route.view)
    strings = _read_optional_json(view_dir / "l10n.json")
    if strings is None:
        template = views_dir.joinpath(*PurePosixPath(route.view + TEMPLATE_SUFFIX).parts)
        if not template.is_file():
            raise ConfigurationError(
                f"View '{route.name}' has no l10n.json and no template at {template}"
            )
        return None
    if not isinstance(strings, dict):
        raise ConfigurationError(f"{view_dir / 'l10n.json'} must hold a JSON object")
    return strings


def load_view_assets(views_dir: Path, route: Route) -> dict[str, dict[str, str]] | None:
    path = _view_dir(views_dir, route.view) / "l10n-static.json"
    assets = _read_optional_json(path)
    if assets is None:
        return None
    try:
        return AssetTable.model_validate(assets).root
    except ValidationError as exc:
        raise ConfigurationError(f"{path} must map language codes to asset URL objects: {exc}") from exc


def load_views(
    routes_file: Path,
    views_dir: Path,
    mapping: dict[str, str] | None = None,
) -> list[ViewConfig]:
    views: list[ViewConfig] = []
    seen: set[str] = set()

    for route in load_routes(routes_file):
        if route.is_redirect:
            continue
        if not route.name or not route.view:
            raise ConfigurationError(f"Route {route.model_dump(exclude_none=True)} needs a name and a view")
        if route.name in seen:
            continue
        seen.add(route.name)

        config = ViewConfig(
            name=route.name,
            view=route.view,
            defaults=load_view_defaults(views_dir, route),
            assets=load_view_assets(views_dir, route),
            resource=resource_name(route.name, mapping),
        )
        if config.resource != config.name:
            logger.debug("View %s uses resource %s", config.name, config.resource)
        views.append(config)

    return views
