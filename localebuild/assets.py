"""Localized static-asset URLs.

Each language gets every English asset key; a language's own URL wins
where it provides one.
"""

from localebuild.languages import FALLBACK_LANGUAGE
from localebuild.merge import defaults


def localize_assets(
    assets: dict[str, dict[str, str]] | None,
    languages: list[str],
) -> dict[str, dict[str, str]]:
    if not assets:
        return {}
    english = assets.get(FALLBACK_LANGUAGE) or {}
    return {
        code: defaults(dict(assets.get(code) or {}), english)
        for code in languages
    }
