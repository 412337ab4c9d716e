"""Message catalogs and locale selection."""

import logging
import os
from importlib import resources
from typing import Any

import yaml

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en-US"

# Unicode FIRST STRONG ISOLATE / POP DIRECTIONAL ISOLATE
FSI = "\u2068"
PDI = "\u2069"

_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def normalize_locale(value: str) -> str | None:
    """Turn a POSIX locale string into a language tag.

    Examples:
        >>> normalize_locale("zh_CN.UTF-8")
        'zh-CN'

        >>> normalize_locale("en")
        'en'

        >>> normalize_locale("C") is None
        True
    """
    tag = value.split(".", 1)[0].split("@", 1)[0].strip()
    if not tag or tag in ("C", "POSIX"):
        return None

    parts = tag.replace("_", "-").split("-")
    parts[0] = parts[0].lower()
    if len(parts) > 1:
        parts[1] = parts[1].upper()
    return "-".join(parts)


def requested_languages(environ: dict[str, str] | None = None) -> list[str]:
    """Locales the user asked for, most preferred first.

    ``LANGUAGE`` is a colon-separated priority list; after that the first
    set of ``LC_ALL``, ``LC_MESSAGES`` and ``LANG`` wins.
    """
    env = os.environ if environ is None else environ
    requested: list[str] = []

    for item in env.get("LANGUAGE", "").split(":"):
        tag = normalize_locale(item)
        if tag and tag not in requested:
            requested.append(tag)

    for var in _LOCALE_ENV_VARS:
        if env.get(var):
            tag = normalize_locale(env[var])
            if tag and tag not in requested:
                requested.append(tag)
            break

    return requested


def available_locales() -> list[str]:
    """Locales with a shipped catalog."""
    catalog_dir = resources.files(__package__) / "i18n"
    return sorted(entry.name[: -len(".yaml")] for entry in catalog_dir.iterdir() if entry.name.endswith(".yaml"))


def load_catalog(locale: str) -> dict[str, str]:
    """Read the catalog for ``locale`` from package data.

    Raises:
        FileNotFoundError: If no catalog exists for ``locale``
    """
    path = resources.files(__package__) / "i18n" / f"{locale}.yaml"
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return data if data else {}


def negotiate(requested: list[str], available: list[str]) -> str:
    """Pick the best available locale for the requested ones.

    An exact tag match wins; otherwise a locale sharing the language subtag
    is accepted. Falls back to FALLBACK_LOCALE.

    Examples:
        >>> negotiate(["zh-TW", "en-US"], ["en-US", "zh-CN"])
        'zh-CN'

        >>> negotiate(["fr-FR"], ["en-US", "zh-CN"])
        'en-US'
    """
    for tag in requested:
        if tag in available:
            return tag
        language = tag.split("-", 1)[0]
        for locale in available:
            if locale.split("-", 1)[0] == language:
                return locale
    return FALLBACK_LOCALE


class Localizer:
    """Localization context.

    Created once at startup and handed to everything that renders
    user-facing text.

    Args:
        requested: Preferred locales, most preferred first
        use_isolating: Wrap interpolated arguments in Unicode isolation marks
    """

    def __init__(self, requested: list[str] | None = None, use_isolating: bool = True):
        self.use_isolating = use_isolating
        self.fallback = load_catalog(FALLBACK_LOCALE)
        self.locale = negotiate(requested or [], available_locales())
        self.messages = self.fallback if self.locale == FALLBACK_LOCALE else load_catalog(self.locale)
        logger.debug(f"Using locale {self.locale} (requested: {requested})")

    def set_use_isolating(self, value: bool) -> None:
        self.use_isolating = value

    def get(self, key: str, **args: Any) -> str:
        """Localized message ``key`` with ``{name}`` placeholders filled from ``args``.

        Missing keys fall back to the fallback catalog, then to the key itself.
        """
        template = self.messages.get(key)
        if template is None:
            template = self.fallback.get(key)
        if template is None:
            logger.warning(f"No translation for message '{key}'")
            return key

        if self.use_isolating:
            args = {name: f"{FSI}{value}{PDI}" for name, value in args.items()}
        return template.format(**args)
