import json
from dataclasses import dataclass
from pathlib import Path

import pytest

from localebuild.config import BuildConfig, settings


SAMPLE_ROUTES = [
    {"name": "about", "pattern": "^/about/?$", "view": "about/about", "title": "About"},
    {"name": "splash", "pattern": "^/?$", "view": "splash/presentation"},
    {"name": "old-about", "pattern": "^/info/?$", "redirect": "/about"},
]


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def read_bundle(path: Path, global_name: str = "window._messages") -> dict:
    """Parse a written .intl.js bundle back into its tables."""
    content = path.read_text(encoding="utf-8")
    prefix = f"{global_name} = "
    assert content.startswith(prefix)
    assert content.endswith(";")
    return json.loads(content[len(prefix):-1])


@dataclass
class SourceTree:
    root: Path
    source_dir: Path
    localizations_dir: Path
    output_dir: Path

    @property
    def views_dir(self) -> Path:
        return self.source_dir / "views"

    def config(self, **kwargs) -> BuildConfig:
        return BuildConfig(source_dir=self.source_dir, **kwargs)

    def add_translation(self, resource: str, code: str, data) -> Path:
        return write_json(
            self.localizations_dir / f"scratch-website.{resource}-l10njson" / f"{code}.json",
            data,
        )

    def add_raw_translation(self, resource: str, code: str, text: str) -> Path:
        path = self.localizations_dir / f"scratch-website.{resource}-l10njson" / f"{code}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def add_view(self, view: str, defaults=None, assets=None, template: bool = True) -> None:
        parts = view.split("/")
        view_dir = self.views_dir.joinpath(*parts[:-1])
        view_dir.mkdir(parents=True, exist_ok=True)
        if template:
            (view_dir / f"{parts[-1]}.jsx").write_text("export default () => null;\n")
        if defaults is not None:
            write_json(view_dir / "l10n.json", defaults)
        if assets is not None:
            write_json(view_dir / "l10n-static.json", assets)

    def set_routes(self, routes) -> None:
        write_json(self.source_dir / "routes.json", routes)


@pytest.fixture
def source_tree(tmp_path) -> SourceTree:
    """A minimal application tree: the scenario from the about page."""
    tree = SourceTree(
        root=tmp_path,
        source_dir=tmp_path / "src",
        localizations_dir=tmp_path / "localizations",
        output_dir=tmp_path / "build",
    )
    tree.localizations_dir.mkdir()
    tree.output_dir.mkdir()
    write_json(tree.source_dir / "l10n.json", {"g.a": "A"})
    tree.set_routes([SAMPLE_ROUTES[0]])
    tree.add_view("about/about", defaults={"v.a": "V"})
    return tree


@pytest.fixture(autouse=True)
def _reset_settings():
    settings.reset()
    yield
    settings.reset()
