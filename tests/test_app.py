"""Composition root tests."""

import io
import logging
import sys

import pytest
from pydantic import ValidationError

from config.settings import Settings
from devblog import site_data
from devblog.app import create_site_context
from devblog.guardrails import LocaleCoverageError
from devblog.tracing.logger import get_tracer, log_site_event, setup_tracing


class TestCreateSiteContext:
    """create_site_context unit tests."""

    def test_default_context(self):
        """Default settings bind t to English."""
        context = create_site_context(Settings())

        assert context.lang == "en"
        assert context.t("nav.blog") == "Blog"
        assert context.t("no.such.key") is None
        assert context.coverage.valid
        assert context.site is site_data.SITE
        assert [c.name for c in context.categories] == ["Blog", "Archive", "Search", "About"]

    def test_default_lang_from_settings(self):
        """The configured language drives t and the site config."""
        context = create_site_context(Settings(default_lang="zh-cn"))

        assert context.config.lang == "zh-cn"
        assert context.t("nav.archive") == "归档"
        assert context.translator.translate("cs", "nav.archive") == "Archiv"

    def test_site_data_is_not_mutated(self):
        create_site_context(Settings(default_lang="cs"))

        assert site_data.CONFIG.lang == "en"

    def test_unknown_default_lang(self):
        with pytest.raises(ValueError, match="'de'"):
            create_site_context(Settings(default_lang="de"))

    def test_lenient_coverage_logs_gaps(self, partial_locale_dir):
        """Missing keys are reported as warnings and resolved via fallback."""
        context = create_site_context(Settings(locale_dir=str(partial_locale_dir)))

        assert not context.coverage.valid
        assert context.translator.translate("fr", "nav.about") == "À propos"
        assert context.translator.translate("fr", "nav.archive") == "Archive"

        [gap] = get_tracer().events_for("i18n")
        assert gap.event_type == "locale_gap"
        assert gap.language == "fr"
        assert "nav.archive" in gap.keys
        assert get_tracer().events_for(language="fr") == [gap]

    def test_strict_coverage_fails_fast(self, partial_locale_dir):
        settings = Settings(locale_dir=str(partial_locale_dir), strict_locales=True)

        with pytest.raises(LocaleCoverageError) as exc_info:
            create_site_context(settings)

        assert exc_info.value.report.incomplete[0].language == "fr"

    def test_yaml_default_language(self, partial_locale_dir):
        """A language loaded from YAML can be the default."""
        context = create_site_context(
            Settings(default_lang="fr", locale_dir=str(partial_locale_dir))
        )

        assert context.t("nav.about") == "À propos"
        assert context.t("nav.archive") is None
        # Bundled locales carry keys fr lacks
        assert context.coverage.valid
        assert context.coverage.locales[0].extra_keys

    def test_startup_event(self):
        create_site_context(Settings())

        [startup] = get_tracer().events_for("site")
        assert startup.event_type == "startup"
        assert startup.language == "en"
        assert startup.languages == ["en", "zh-cn", "cs"]

    def test_invalid_log_level_is_rejected_by_settings(self, monkeypatch):
        """An unknown LOG_LEVEL fails settings validation, not tracing setup."""
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            create_site_context()


class TestSiteTracer:
    """Startup tracer tests."""

    def test_events_are_written_to_given_stream(self):
        stream = io.StringIO()
        setup_tracing("INFO", stream=stream)

        log_site_event("startup", "site", "ready", language="cs", languages=["en", "cs"])

        output = stream.getvalue()
        assert "[site] startup: ready" in output
        assert "lang=cs" in output
        assert "languages=en,cs" in output

    def test_level_filters_output_but_keeps_events(self):
        stream = io.StringIO()
        tracer = setup_tracing("WARNING", stream=stream)

        log_site_event("startup", "site", "ready")
        log_site_event(
            "locale_gap", "i18n", "falls back", language="fr", keys=["a", "b"], level=logging.WARNING
        )

        assert "startup" not in stream.getvalue()
        assert "keys=2" in stream.getvalue()
        assert [e.event_type for e in tracer.events] == ["startup", "locale_gap"]

    def test_defaults_to_stderr(self):
        tracer = setup_tracing()

        [handler] = tracer.logger.handlers
        assert handler.stream is sys.stderr

    def test_setup_replaces_previous_handler(self):
        setup_tracing(stream=io.StringIO())
        tracer = setup_tracing(stream=io.StringIO())

        assert len(tracer.logger.handlers) == 1
