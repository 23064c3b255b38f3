"""Composition root: build the site core once at startup."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field

from config.settings import Settings
from devblog import site_data
from devblog.guardrails import CoverageReport, LocaleCoverageError, check_locale_coverage
from devblog.i18n import Resolver, Translator, build_default_registry
from devblog.models import (
    CommentConfig,
    DonateConfig,
    FriendshipLink,
    InfoLink,
    NavCategory,
    SiteConfig,
    SiteInfo,
)
from devblog.registry import LocaleRegistry
from devblog.tracing.logger import log_site_event, setup_tracing


@dataclass
class SiteContext:
    """Everything templates need, built once and passed explicitly."""

    settings: Settings
    registry: LocaleRegistry
    translator: Translator
    t: Resolver
    coverage: CoverageReport
    site: SiteInfo
    config: SiteConfig
    categories: list[NavCategory] = field(default_factory=list)
    info_links: list[InfoLink] = field(default_factory=list)
    donate: DonateConfig = field(default_factory=DonateConfig)
    friendship_links: list[FriendshipLink] = field(default_factory=list)
    comment: CommentConfig = field(default_factory=CommentConfig)

    @property
    def lang(self) -> str:
        return self.config.lang


def create_site_context(settings: Settings | None = None) -> SiteContext:
    """Build the site context from settings.

    Args:
        settings: Settings to use; loaded from the environment if omitted.

    Returns:
        The assembled SiteContext with ``t`` bound to the default language.

    Raises:
        ValueError: If the default language is not registered or a locale
            file is malformed.
        LocaleCoverageError: If ``strict_locales`` is set and a language is
            missing keys of the default language.
    """
    if settings is None:
        settings = Settings()

    if settings.tracing_enabled:
        setup_tracing(settings.log_level)

    registry = build_default_registry(settings.default_lang, settings.locale_dir)
    coverage = _check_coverage(registry, strict=settings.strict_locales)

    translator = Translator(registry)
    config = dataclasses.replace(site_data.CONFIG, lang=registry.default_language)

    log_site_event(
        "startup",
        "site",
        "Site context initialized",
        language=config.lang,
        languages=registry.list_languages(),
    )

    return SiteContext(
        settings=settings,
        registry=registry,
        translator=translator,
        t=translator.use_translations(config.lang),
        coverage=coverage,
        site=site_data.SITE,
        config=config,
        categories=list(site_data.CATEGORIES),
        info_links=list(site_data.INFO_LINKS),
        donate=site_data.DONATE,
        friendship_links=list(site_data.FRIENDSHIP_LINKS),
        comment=site_data.COMMENT,
    )


def _check_coverage(registry: LocaleRegistry, strict: bool) -> CoverageReport:
    report = check_locale_coverage(registry)
    if report.valid:
        return report
    if strict:
        raise LocaleCoverageError(report)

    for coverage in report.incomplete:
        log_site_event(
            "locale_gap",
            "i18n",
            f"'{coverage.language}' falls back to '{report.default_language}' "
            f"for {len(coverage.missing_keys)} keys",
            language=coverage.language,
            keys=coverage.missing_keys,
            level=logging.WARNING,
        )
    return report
