import click
from loguru import logger

from .config import LOG_LEVELS, load_config
from .decoder import read_entries
from .errors import ConfigError, DecodeError, SerializationError
from .report import assemble


def setup_logging(level: str):
    logger.remove()
    # resolve stderr on every message so the sink follows click's streams
    logger.add(
        lambda msg: click.echo(msg, err=True, nl=False),
        level=level.upper(),
        format="<level>{level: <8}</level> | {message}",
    )


@click.command()
@click.option("--img", "-i", type=click.Path(dir_okay=False), help="Image to extract info from")
@click.option(
    "--gmap",
    is_flag=True,
    help="Create a Google Maps link from the GPS infos if there are some",
)
@click.option("--json", "to_json", is_flag=True, help="Output the tags as JSON")
@click.option("-c", "--config", help="Config file path", type=click.Path(exists=True))
@click.option("--max-length", type=click.IntRange(min=1), help="Truncate longer values")
@click.option(
    "--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), help="Log level"
)
@click.pass_context
def main(
    ctx: click.Context,
    img: str | None,
    gmap: bool,
    to_json: bool,
    config: str | None,
    max_length: int | None,
    log_level: str | None,
):
    if img is None:
        click.echo(ctx.get_help())
        return

    try:
        settings = load_config(config)
    except ConfigError as e:
        logger.error(str(e))
        ctx.exit(2)

    overrides = {}
    if gmap:
        overrides["map_link"] = True
    if to_json:
        overrides["json_output"] = True
    if max_length is not None:
        overrides["max_value_length"] = max_length
    if log_level is not None:
        overrides["log_level"] = log_level
    settings = settings.model_copy(update=overrides)
    setup_logging(settings.log_level)

    try:
        entries = read_entries(img, settings.ifds)
    except DecodeError as e:
        logger.error(f"[*] {e}")
        ctx.exit(1)

    report = assemble(entries, settings.map_link, settings.max_value_length)

    if settings.json_output:
        try:
            output = report.to_json(settings.json_indent)
        except SerializationError as e:
            logger.error(f"[*] {e}")
            ctx.exit(1)
        click.echo(output)
    else:
        for line in report.text_lines():
            click.echo(line)


if __name__ == "__main__":
    main()  # pylint: disable=no-value-for-parameter
