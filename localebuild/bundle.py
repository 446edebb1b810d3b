"""Per-view locale bundles.

For each view the English table is ``general EN`` overlaid with the view's
default strings.  Every other language is its general table overlaid with
the view's translation file (or, lacking one, the view defaults), then
filled from English so no id is ever missing.  Localized asset URLs are
merged in last and the result is written as ``<view>.intl.js``.
"""

import asyncio
import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from localebuild.assets import localize_assets
from localebuild.config import BuildConfig
from localebuild.general import MessageTable, load_baseline, resolve_general_locales, resource_dir
from localebuild.languages import FALLBACK_LANGUAGE, load_languages
from localebuild.merge import defaults, merge
from localebuild.report import BuildReport, TranslationParseError
from localebuild.views import ViewConfig, load_views

logger = logging.getLogger("localebuild.bundle")

BUNDLE_SUFFIX = ".intl.js"


def _current_umask() -> int:
    # os.umask can only be read by setting it; done once, before any worker thread
    mask = os.umask(0)
    os.umask(mask)
    return mask


UMASK = _current_umask()


def _bundle_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~UMASK


def render_bundle(tables: dict[str, Any], global_name: str) -> str:
    payload = json.dumps(tables, ensure_ascii=False, separators=(",", ":"))
    return f"{global_name} = {payload};"


def write_atomic(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` via a temp file so readers never see a partial bundle."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp_name, _bundle_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def _prune(table: dict[str, Any], english: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in table.items() if key in english}


class BundleBuilder:
    """Builds and writes the bundles for a set of views.

    Views run concurrently up to ``config.view_concurrency``; within a view
    every language file is read at once.  Each view works on its own
    tables, only ``report`` is shared.
    """

    def __init__(
        self,
        config: BuildConfig,
        languages: list[str],
        general: dict[str, MessageTable],
        localizations_dir: Path,
        output_dir: Path,
        report: BuildReport | None = None,
    ) -> None:
        self.config = config
        self.languages = languages
        self.general = general
        self.localizations_dir = Path(localizations_dir)
        self.output_dir = Path(output_dir)
        self.report = report or BuildReport()

    async def load_translation(self, view: ViewConfig, code: str) -> dict[str, Any] | None:
        """Read the view's translations for ``code``; None when there is no file."""
        path = resource_dir(self.localizations_dir, view.resource) / f"{code}.json"
        try:
            raw = await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            return None
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise TranslationParseError(view.name, code, str(path), str(exc)) from exc
        if not isinstance(data, dict):
            raise TranslationParseError(view.name, code, str(path), "expected a JSON object")
        return data

    async def build_view(self, view: ViewConfig) -> dict[str, dict[str, Any]]:
        english = merge(self.general[FALLBACK_LANGUAGE], view.defaults)
        tables: dict[str, dict[str, Any]] = {FALLBACK_LANGUAGE: english}

        # English comes only from the general baseline and the view defaults
        codes = [code for code in self.languages if code != FALLBACK_LANGUAGE]
        results = await asyncio.gather(
            *(self.load_translation(view, code) for code in codes),
            return_exceptions=True,
        )

        for code, result in zip(codes, results):
            if isinstance(result, TranslationParseError):
                logger.error("%s", result)
                self.report.record_parse_error(result)
                continue
            if isinstance(result, BaseException):
                raise result

            general = self.general.get(code, self.general[FALLBACK_LANGUAGE])
            if result is None:
                if code not in self.config.quiet_fallback:
                    logger.info("No translations for %s in %s, using English", view.name, code)
                table = merge(general, view.defaults)
            else:
                table = merge(general, result)
            tables[code] = defaults(table, english)

        assets = localize_assets(view.assets, self.languages)
        bundle = merge(tables, {code: urls for code, urls in assets.items() if code in tables})

        english = bundle[FALLBACK_LANGUAGE]
        return {
            code: (bundle[code] if code == FALLBACK_LANGUAGE else _prune(bundle[code], english))
            for code in self.languages
            if code in bundle
        }

    def bundle_path(self, view: ViewConfig) -> Path:
        return self.output_dir / f"{view.name}{BUNDLE_SUFFIX}"

    async def write_bundle(self, view: ViewConfig, tables: dict[str, dict[str, Any]]) -> bool:
        path = self.bundle_path(view)
        content = render_bundle(tables, self.config.global_name)
        try:
            await asyncio.to_thread(write_atomic, path, content)
        except OSError as exc:
            logger.error("Writing %s failed: %s", path, exc)
            self.report.record_write_error(view.name, exc)
            return False
        self.report.mark_written(view.name)
        logger.info("Wrote %s (%d languages)", path.name, len(tables))
        return True

    async def process_view(self, view: ViewConfig, semaphore: asyncio.Semaphore) -> None:
        async with semaphore:
            tables = await self.build_view(view)
            await self.write_bundle(view, tables)

    async def run(self, views: list[ViewConfig]) -> BuildReport:
        semaphore = asyncio.Semaphore(self.config.view_concurrency)
        await asyncio.gather(*(self.process_view(view, semaphore) for view in views))
        return self.report


async def build_locales(
    config: BuildConfig,
    localizations_dir: Path,
    output_dir: Path,
    *,
    languages: list[str] | None = None,
    mapping: dict[str, str] | None = None,
    report: BuildReport | None = None,
) -> BuildReport:
    """Run a full build: general strings, view configuration, then every bundle."""
    languages = languages or load_languages(config.languages_file)
    baseline = load_baseline(config.general_file)
    general = resolve_general_locales(languages, localizations_dir, baseline)
    views = load_views(config.routes_file, config.views_dir, mapping)

    builder = BundleBuilder(config, languages, general, localizations_dir, output_dir, report)
    logger.debug("Building %d views in %d languages", len(views), len(languages))
    return await builder.run(views)
