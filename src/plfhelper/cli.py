from __future__ import annotations

import json
from pathlib import Path

import click
import yaml

from plfhelper.errors import ConfigurationError, NumberDecodeError
from plfhelper.levels import TITLES, level_for_points, points_to_next_level
from plfhelper.locale import LOCALES, catalog_for, load_catalog, parse_locale
from plfhelper.logging import configure_logging, get_logger
from plfhelper.parsing import PageParser
from plfhelper.settings import Settings

logger = get_logger(__name__)


def _load_values(path: Path | None, size: int) -> list[float]:
    if path is None:
        return [0.0] * size
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise click.BadParameter("values file must contain a list of numbers", param_hint="--values")
    try:
        values = [float(item) for item in data]
    except (TypeError, ValueError) as e:
        raise click.BadParameter(f"values file has a non-numeric entry: {e}", param_hint="--values") from e
    if len(values) < size:
        values.extend([0.0] * (size - len(values)))
    return values


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def cli(ctx: click.Context) -> None:
    """plfhelper command line interface."""
    settings = Settings()
    configure_logging(settings)
    ctx.obj = settings


@cli.command("parse")
@click.argument("snapshots", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--locale", "locale_code", default=None, help="Two-letter locale code (default: PLFHELPER_LOCALE).")
@click.option("--players-index", type=int, default=None, help="Slot for the total player count.")
@click.option("--players1-index", type=int, default=None, help="Slot for the last player with one point.")
@click.option("--values", "values_path", type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None)
@click.option("--catalog", "catalog_path", type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None)
@click.pass_obj
def parse(
    settings: Settings,
    snapshots: tuple[Path, ...],
    locale_code: str | None,
    players_index: int | None,
    players1_index: int | None,
    values_path: Path | None,
    catalog_path: Path | None,
) -> None:
    """Parse snapshot files in order into one value vector and print it as JSON.

    Without explicit reserved indices the two slots after the products are used.
    """
    try:
        locale = parse_locale(locale_code or settings.locale)
        if catalog_path is not None:
            file_locale, catalog = load_catalog(catalog_path)
            if file_locale is not locale:
                raise ConfigurationError(f"catalog is for {file_locale.value}, not {locale.value}")
        else:
            catalog = catalog_for(locale, settings.catalog_root)

        if players_index is None:
            players_index = settings.players_index if settings.players_index >= 0 else len(catalog)
        if players1_index is None:
            players1_index = settings.players1_index if settings.players1_index >= 0 else len(catalog) + 1
        parser = PageParser(locale, catalog, players_index=players_index, players1_index=players1_index)
    except ConfigurationError as e:
        raise click.BadParameter(str(e)) from e

    values = _load_values(values_path, max(len(catalog), players_index + 1, players1_index + 1))
    changed: list[bool] = []
    for snapshot in snapshots:
        try:
            changed.append(parser.parse(snapshot.read_text(encoding="utf-8"), values))
        except NumberDecodeError as e:
            raise click.ClickException(f"{snapshot}: {e}") from e
        logger.info("snapshot_parsed", path=str(snapshot), changed=changed[-1])

    click.echo(json.dumps({"changed": changed, "values": values}, ensure_ascii=False))


@cli.command("locales")
def locales() -> None:
    """List supported locales."""
    for locale, config in LOCALES.items():
        number_format = config.number_format
        click.echo(
            f"{locale.value}  {number_format.culture}  currency={config.currency}  "
            f"decimal={number_format.decimal_separator!r}  group={number_format.group_separator!r}"
        )


@cli.command("level")
@click.argument("points", type=click.IntRange(min=0))
def level(points: int) -> None:
    """Show the level title for a points total."""
    current = level_for_points(points)
    missing = points_to_next_level(points)
    suffix = "" if missing is None else f" ({missing} points to next level)"
    click.echo(f"{TITLES[current]}{suffix}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
