"""Locale coverage guardrail tests."""

from devblog.guardrails import LocaleCoverageError, check_locale_coverage
from devblog.i18n import build_default_registry
from devblog.registry import LocaleRegistry


def test_bundled_locales_are_complete():
    """Bundled locales cover every English key."""
    report = check_locale_coverage(build_default_registry())

    assert report.valid
    assert report.incomplete == []
    assert {c.language for c in report.locales} == {"zh-cn", "cs"}


def test_reports_missing_and_extra_keys():
    registry = LocaleRegistry(
        {
            "en": {"a": "A", "b": "B", "c": "C"},
            "cs": {"a": "Á", "z": "Ž"},
            "zh-cn": {"a": "甲", "b": "乙", "c": "丙"},
        },
        "en",
    )

    report = check_locale_coverage(registry)

    assert not report.valid
    assert report.default_key_count == 3
    [cs] = report.incomplete
    assert cs.language == "cs"
    assert cs.missing_keys == ["b", "c"]
    assert cs.extra_keys == ["z"]
    assert "cs: 2 missing" in report.summary()


def test_extra_keys_alone_keep_report_valid():
    registry = LocaleRegistry({"en": {"a": "A"}, "cs": {"a": "Á", "z": "Ž"}}, "en")

    report = check_locale_coverage(registry)

    assert report.valid
    assert report.locales[0].extra_keys == ["z"]


def test_default_language_is_not_checked_against_itself():
    registry = LocaleRegistry({"en": {"a": "A"}}, "en")

    report = check_locale_coverage(registry)

    assert report.locales == []
    assert report.valid
    assert "1 keys" in report.summary()


def test_coverage_error_carries_report():
    registry = LocaleRegistry({"en": {"a": "A"}, "cs": {}}, "en")
    report = check_locale_coverage(registry)

    error = LocaleCoverageError(report)

    assert error.report is report
    assert "cs: 1 missing" in str(error)
    assert isinstance(error, ValueError)
