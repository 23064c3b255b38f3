"""Guardrail comparing each locale's key set against the default language."""

from dataclasses import dataclass, field

from devblog.registry.locale_registry import LocaleRegistry


class LocaleCoverageError(ValueError):
    """Raised when strict startup finds keys missing from a locale."""

    def __init__(self, report: "CoverageReport"):
        self.report = report
        super().__init__(report.summary())


@dataclass
class LocaleCoverage:
    """Key coverage of one language relative to the default."""

    language: str
    missing_keys: list[str] = field(default_factory=list)
    extra_keys: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.missing_keys


@dataclass
class CoverageReport:
    """Coverage of every non-default language."""

    default_language: str
    default_key_count: int
    locales: list[LocaleCoverage] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return all(c.complete for c in self.locales)

    @property
    def incomplete(self) -> list[LocaleCoverage]:
        return [c for c in self.locales if not c.complete]

    def summary(self) -> str:
        if self.valid:
            return (
                f"All locales cover the {self.default_key_count} keys "
                f"of '{self.default_language}'"
            )
        parts = [f"{c.language}: {len(c.missing_keys)} missing" for c in self.incomplete]
        return f"Locales missing keys of '{self.default_language}': " + ", ".join(parts)


def check_locale_coverage(registry: LocaleRegistry) -> CoverageReport:
    """Compare every language's key set with the default language's.

    Args:
        registry: The Locale Registry to check.

    Returns:
        CoverageReport listing missing and extra keys per language.
    """
    default_keys = set(registry.default_dictionary)
    report = CoverageReport(
        default_language=registry.default_language,
        default_key_count=len(default_keys),
    )

    for language, strings in registry.items():
        if language == registry.default_language:
            continue
        keys = set(strings)
        report.locales.append(
            LocaleCoverage(
                language=language,
                missing_keys=sorted(default_keys - keys),
                extra_keys=sorted(keys - default_keys),
            )
        )

    return report
