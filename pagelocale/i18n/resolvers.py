"""Locale resolution logic for determining the user's preferred language.

Candidates are evaluated in fixed precedence order: request parameter,
persisted choice, environment language, caller default. The environment
language is a free-form tag, so it is matched against the registry (exact,
Chinese script, primary subtag) before the default is considered.
"""

import os
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Mapping, Optional, Union

from pagelocale.i18n.models import primary_subtag
from pagelocale.i18n.registry import LocaleRegistry
from pagelocale.logging import get_module_logger

logger = get_module_logger()

# Subtags marking Traditional Chinese (region or script)
TRADITIONAL_CHINESE_MARKERS = frozenset({"TW", "HK", "HANT"})

ENVIRONMENT_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")


def normalize_tag(tag: Optional[str]) -> Optional[str]:
    """Normalize a language tag to hyphenated BCP 47 style.

    POSIX locale names are accepted: "zh_TW.UTF-8" becomes "zh-TW" and
    "fa_IR@calendar" becomes "fa-IR". "C" and "POSIX" carry no language.

    Args:
        tag: Raw tag, possibly None.

    Returns:
        Normalized tag, or None when the input carries no language.
    """
    if not tag:
        return None
    tag = tag.strip().split(".", 1)[0].split("@", 1)[0].replace("_", "-")
    if not tag or tag.upper() in ("C", "POSIX"):
        return None
    return tag


def detect_environment_language(
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Read the language tag from process environment variables.

    Checks LC_ALL, LC_MESSAGES, LANG then LANGUAGE (first entry of its
    colon separated list).

    Args:
        environ: Mapping to read from (default: os.environ).

    Returns:
        Normalized tag or None.
    """
    environ = os.environ if environ is None else environ
    for name in ENVIRONMENT_VARIABLES:
        value = environ.get(name, "")
        if name == "LANGUAGE":
            value = value.split(":", 1)[0]
        tag = normalize_tag(value)
        if tag:
            return tag
    return None


@dataclass
class LocaleCandidates:
    """Candidate locale codes in precedence order.

    Attributes:
        requested: Explicit request parameter (e.g., ?lang=fa).
        persisted: Previously persisted choice.
        environment: Language tag detected from the host environment.
        default: Caller-supplied default.
    """

    requested: Optional[str] = None
    persisted: Optional[str] = None
    environment: Optional[str] = None
    default: Optional[str] = None

    def __iter__(self) -> Iterator[Optional[str]]:
        return iter((self.requested, self.persisted, self.environment, self.default))

    @classmethod
    def from_sequence(cls, candidates: Iterable[Optional[str]]) -> "LocaleCandidates":
        """Build from a (requested, persisted, environment, default) iterable.

        Shorter iterables leave the remaining candidates empty; anything past
        the fourth candidate is ignored.
        """
        return cls(*islice(candidates, 4))


class LanguageNegotiator:
    """Matches an arbitrary language tag to a registered locale code."""

    def __init__(self, registry: LocaleRegistry):
        self.registry = registry

    def match(self, tag: Optional[str]) -> Optional[str]:
        """Find the registered code best matching tag.

        Rules, first hit wins:
        1. exact match of the full tag;
        2. primary subtag "zh": Traditional code when a TW, HK or Hant
           subtag is present, Simplified code otherwise;
        3. first registered code (registry order) with the same primary
           subtag.

        Args:
            tag: Language tag, e.g. "zh-Hant-HK" or "ru-RU".

        Returns:
            Registered code or None.
        """
        tag = normalize_tag(tag)
        if tag is None:
            return None

        if self.registry.has(tag):
            return tag

        language = primary_subtag(tag).lower()
        if language == "zh":
            subtags = {part.upper() for part in tag.split("-")[1:]}
            if subtags & TRADITIONAL_CHINESE_MARKERS:
                code = self.registry.traditional_chinese_code
            else:
                code = self.registry.simplified_chinese_code
            return code if self.registry.has(code) else None

        for code in self.registry.codes():
            if primary_subtag(code).lower() == language:
                return code

        return None


class LocaleResolver:
    """Resolves the active locale from candidate sources.

    Resolution never raises; it always produces a string, leaving the
    final validity check to the caller.
    """

    def __init__(self, registry: LocaleRegistry):
        """Initialize locale resolver.

        Args:
            registry: Table of supported locales.
        """
        self.registry = registry
        self.negotiator = LanguageNegotiator(registry)
        self.log = logger.bind(default_locale=registry.default_code)

    def resolve(
        self,
        candidates: Union[LocaleCandidates, Iterable[Optional[str]]],
        fallback_code: str,
    ) -> str:
        """Resolve the locale code to activate.

        Args:
            candidates: LocaleCandidates, or an iterable ordered as
                (requested, persisted, environment, default).
            fallback_code: Returned verbatim when nothing matches.

        Returns:
            The first registered requested or persisted code, else the
            environment tag matched against the registry, else a registered
            default, else fallback_code.
        """
        if not isinstance(candidates, LocaleCandidates):
            candidates = LocaleCandidates.from_sequence(candidates)

        for candidate in (candidates.requested, candidates.persisted):
            if self.registry.has(candidate):
                self.log.debug("resolved_from_candidate", locale=candidate)
                return candidate

        matched = self.negotiator.match(candidates.environment)
        if matched is not None:
            self.log.debug(
                "resolved_from_environment",
                locale=matched,
                environment=candidates.environment,
            )
            return matched

        if self.registry.has(candidates.default):
            self.log.debug("resolved_from_default", locale=candidates.default)
            return candidates.default

        self.log.info("no_matching_locale", fallback=fallback_code)
        return fallback_code
