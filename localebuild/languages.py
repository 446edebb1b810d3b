"""Supported language codes.

The built-in table mirrors the locales the web application ships.  A
deployment can replace it with ``LOCALEBUILD_LANGUAGES_FILE``, a JSON file
holding either a list of codes or an object keyed by code.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from localebuild.report import ConfigurationError
from localebuild.schemas import Language

logger = logging.getLogger("localebuild.languages")

FALLBACK_LANGUAGE = "en"

SUPPORTED_LANGUAGES: dict[str, dict[str, str]] = {
    "ab": {"name": "Аҧсшәа"},
    "af": {"name": "Afrikaans"},
    "ar": {"name": "العربية"},
    "am": {"name": "አማርኛ"},
    "an": {"name": "Aragonés"},
    "ast": {"name": "Asturianu"},
    "az": {"name": "Azeri"},
    "id": {"name": "Bahasa Indonesia"},
    "bn": {"name": "বাংলা"},
    "be": {"name": "Беларуская"},
    "bg": {"name": "Български"},
    "ca": {"name": "Català"},
    "cs": {"name": "Česky"},
    "cy": {"name": "Cymraeg"},
    "da": {"name": "Dansk"},
    "de": {"name": "Deutsch"},
    "et": {"name": "Eesti"},
    "el": {"name": "Ελληνικά"},
    "en": {"name": "English"},
    "es": {"name": "Español (España)"},
    "es-419": {"name": "Español Latinoamericano"},
    "eo": {"name": "Esperanto"},
    "eu": {"name": "Euskara"},
    "fa": {"name": "فارسی"},
    "fil": {"name": "Filipino"},
    "fr": {"name": "Français"},
    "fy": {"name": "Frysk"},
    "ga": {"name": "Gaeilge"},
    "gd": {"name": "Gàidhlig"},
    "gl": {"name": "Galego"},
    "ko": {"name": "한국어"},
    "ha": {"name": "Hausa"},
    "hy": {"name": "Հայերեն"},
    "he": {"name": "עִבְרִית"},
    "hi": {"name": "हिंदी"},
    "hr": {"name": "Hrvatski"},
    "is": {"name": "Íslenska"},
    "it": {"name": "Italiano"},
    "ka": {"name": "ქართული ენა"},
    "kk": {"name": "қазақша"},
    "sw": {"name": "Kiswahili"},
    "ht": {"name": "Kreyòl ayisyen"},
    "ku": {"name": "Kurdî"},
    "ckb": {"name": "کوردیی ناوەندی"},
    "lv": {"name": "Latviešu"},
    "lt": {"name": "Lietuvių"},
    "hu": {"name": "Magyar"},
    "mi": {"name": "Māori"},
    "mn": {"name": "Монгол хэл"},
    "nl": {"name": "Nederlands"},
    "ja": {"name": "日本語"},
    "ja-Hira": {"name": "にほんご"},
    "nb": {"name": "Norsk Bokmål"},
    "nn": {"name": "Norsk Nynorsk"},
    "uz": {"name": "Oʻzbekcha"},
    "th": {"name": "ไทย"},
    "km": {"name": "ភាសាខ្មែរ"},
    "pl": {"name": "Polski"},
    "pt": {"name": "Português"},
    "pt-br": {"name": "Português Brasileiro"},
    "rap": {"name": "Rapa Nui"},
    "ro": {"name": "Română"},
    "ru": {"name": "Русский"},
    "sk": {"name": "Slovenčina"},
    "sl": {"name": "Slovenščina"},
    "sr": {"name": "Српски"},
    "fi": {"name": "Suomi"},
    "sv": {"name": "Svenska"},
    "vi": {"name": "Tiếng Việt"},
    "tr": {"name": "Türkçe"},
    "uk": {"name": "Українська"},
    "zh-cn": {"name": "简体中文"},
    "zh-tw": {"name": "正體中文"},
}


def load_languages(path: Path | None = None) -> list[str]:
    """Return the supported language codes, English always included."""
    if path is None:
        return list(SUPPORTED_LANGUAGES)

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Could not read language list {path}: {exc}") from exc

    if isinstance(raw, list):
        codes = [str(code) for code in raw]
    elif isinstance(raw, dict):
        codes = []
        for code, details in raw.items():
            try:
                Language.model_validate(details or {})
            except ValidationError as exc:
                raise ConfigurationError(f"Invalid language entry '{code}' in {path}: {exc}") from exc
            codes.append(code)
    else:
        raise ConfigurationError(f"Language list {path} must be a JSON list or object")

    if FALLBACK_LANGUAGE not in codes:
        raise ConfigurationError(f"Language list {path} does not include '{FALLBACK_LANGUAGE}'")

    logger.debug("Loaded %d languages from %s", len(codes), path)
    return list(dict.fromkeys(codes))
