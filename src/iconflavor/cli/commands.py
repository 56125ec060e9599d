"""CLI commands for inspecting icon flavors."""

import logging
import sys
from pathlib import Path

import click

from iconflavor.config.settings import AppSettings
from iconflavor.core.builtin import BuiltinData
from iconflavor.core.exceptions import FlavorError
from iconflavor.core.icons import IconsLoader
from iconflavor.core.models import Icon, IconFlavor
from iconflavor.core.theme import ThemeLoader


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _render(icon: Icon | None) -> str:
    if icon is None:
        return " "
    fg = icon.style.style.fg if icon.style is not None else None
    if fg is None:
        return icon.glyph
    return click.style(icon.glyph, fg=(fg.r, fg.g, fg.b))


def _describe(icon: Icon) -> str:
    if icon.style is None:
        return "no style"
    fg = icon.style.style.fg
    return f"{icon.style.kind} {fg.to_hex() if fg else '(no color)'}"


def _materialize(ctx: click.Context, name: str | None, theme_name: str | None, true_color: bool | None) -> IconFlavor:
    settings: AppSettings = ctx.obj["settings"]
    icons: IconsLoader = ctx.obj["icons"]
    themes: ThemeLoader = ctx.obj["themes"]
    try:
        theme = themes.load(theme_name or settings.theme)
        return icons.materialize(
            name or settings.icons,
            theme,
            settings.true_color if true_color is None else true_color,
        )
    except FlavorError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="User configuration directory holding icons/ and themes/",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, config_dir: Path | None) -> None:
    """Inspect icon flavors and their resolved styles."""
    ctx.ensure_object(dict)
    settings = AppSettings()
    if log_level:
        settings.log_level = log_level
    if config_dir:
        settings.config_dir = config_dir
    _setup_logging(settings.log_level)

    builtin = BuiltinData.from_package()
    ctx.obj["settings"] = settings
    ctx.obj["icons"] = IconsLoader(settings.config_dir, settings.runtime_dir, builtin)
    ctx.obj["themes"] = ThemeLoader(settings.config_dir, settings.runtime_dir, builtin)


@cli.command("list")
@click.option("--themes", "list_themes", is_flag=True, help="List themes instead of icon flavors")
@click.pass_context
def list_(ctx: click.Context, list_themes: bool) -> None:
    """List available icon flavors."""
    loader = ctx.obj["themes"] if list_themes else ctx.obj["icons"]
    for name in loader.names():
        click.echo(name)


@cli.command()
@click.argument("name", required=False)
@click.option("--theme", "theme_name", default=None, help="Theme supplying diagnostic colors")
@click.option("--true-color/--no-true-color", default=None, help="Override true color detection")
@click.pass_context
def show(ctx: click.Context, name: str | None, theme_name: str | None, true_color: bool | None) -> None:
    """Show the resolved icons of a flavor."""
    flavor = _materialize(ctx, name, theme_name, true_color)

    click.echo(f"\n{'═' * 40}")
    click.echo(f"  Icon flavor: {flavor.name}")
    click.echo(f"{'═' * 40}")

    click.echo("\n  Diagnostics")
    for severity, icon in flavor.diagnostic.items():
        click.echo(f"  {_render(icon)}  {severity.value:<16} {_describe(icon)}")

    click.echo("\n  File types")
    for key, icon in sorted(flavor.mime_type.items()):
        click.echo(f"  {_render(icon)}  {key:<16} {_describe(icon)}")

    click.echo("\n  Symbol kinds")
    for key, icon in sorted(flavor.symbol_kind.items()):
        click.echo(f"  {_render(icon)}  {key:<16} {_describe(icon)}")
    click.echo()


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--flavor", "name", default=None, help="Icon flavor to use")
@click.option("--theme", "theme_name", default=None, help="Theme supplying diagnostic colors")
@click.option("--true-color/--no-true-color", default=None, help="Override true color detection")
@click.pass_context
def lookup(
    ctx: click.Context, paths: tuple[str, ...], name: str | None, theme_name: str | None, true_color: bool | None
) -> None:
    """Show the icon used for each file path."""
    flavor = _materialize(ctx, name, theme_name, true_color)
    for path in paths:
        click.echo(f"{_render(flavor.icon_for_path(path))}  {path}")
