"""CLI commands for inspecting the site core."""

from typing import Any

import click
from dotenv import load_dotenv

from config.settings import Settings
from devblog.app import SiteContext, create_site_context
from devblog.guardrails import LocaleCoverageError


def _get_context(ctx: click.Context, **overrides: Any) -> SiteContext:
    """Create a SiteContext from settings plus CLI overrides."""
    options = dict(ctx.obj or {})
    options.update(overrides)
    try:
        return create_site_context(Settings(**options))
    except LocaleCoverageError as e:
        raise click.ClickException(str(e)) from e
    except (ValueError, FileNotFoundError) as e:
        raise click.ClickException(f"Invalid site configuration: {e}") from e


@click.group()
@click.option("--default-lang", default=None, help="Override DEFAULT_LANG")
@click.option("--locale-dir", default=None, type=click.Path(), help="Directory of extra YAML locales")
@click.option("--verbose", is_flag=True, help="Show startup logs")
@click.pass_context
def site(ctx: click.Context, default_lang: str | None, locale_dir: str | None, verbose: bool):
    """Inspect the Dev Blog site configuration and UI strings."""
    load_dotenv()
    ctx.obj = {"log_level": "DEBUG" if verbose else "WARNING"}
    if default_lang:
        ctx.obj["default_lang"] = default_lang
    if locale_dir:
        ctx.obj["locale_dir"] = locale_dir


@site.command()
@click.argument("key")
@click.option("--lang", default=None, help="Language to translate into (default: site language)")
@click.pass_context
def translate(ctx: click.Context, key: str, lang: str | None):
    """Print the UI string for KEY."""
    context = _get_context(ctx)
    value = context.translator.translate(lang or context.lang, key)
    if value is None:
        raise click.ClickException(f"No translation for '{key}'")
    click.echo(value)


@site.command()
@click.pass_context
def languages(ctx: click.Context):
    """List registered languages; the default is marked with '*'."""
    context = _get_context(ctx)
    for language, strings in context.registry.items():
        marker = "*" if language == context.registry.default_language else " "
        click.echo(f"{marker} {language} ({len(strings)} keys)")


@site.command("check-locales")
@click.option("--strict", is_flag=True, help="Exit with an error when keys are missing")
@click.pass_context
def check_locales(ctx: click.Context, strict: bool):
    """Compare every language's keys with the default language."""
    context = _get_context(ctx, strict_locales=False)
    report = context.coverage

    click.echo(report.summary())
    for coverage in report.locales:
        if coverage.missing_keys:
            click.echo(f"  {coverage.language} missing: {', '.join(coverage.missing_keys)}")
        if coverage.extra_keys:
            click.echo(f"  {coverage.language} extra: {', '.join(coverage.extra_keys)}")

    if strict and not report.valid:
        ctx.exit(1)


@site.command("show-config")
@click.pass_context
def show_config(ctx: click.Context):
    """Print the site metadata and navigation."""
    context = _get_context(ctx)
    t = context.t

    click.echo(f"Title: {context.site.title}")
    click.echo(f"Author: {context.site.author}")
    click.echo(f"URL: {context.site.url}")
    click.echo(f"Language: {context.lang}")
    click.echo("Navigation:")
    for category in context.categories:
        label = t(f"nav.{category.name.lower()}") or category.name
        click.echo(f"  {label} -> {category.href}")
    click.echo(f"Comments: {context.comment.type.value if context.comment.enable else 'disabled'}")


if __name__ == "__main__":
    site()
