"""CLI main entry point."""

import json
import logging

import click

from .config import Config
from .consts import CONFIG_PATH_DEFAULT
from .errors import FlexFormException
from .log import setup as setup_log
from .mapping import FieldMappingResolver

logger = logging.getLogger(__name__)


def load_config(ctx) -> Config:
    config_path = ctx.obj["config_path"]
    try:
        cfg = Config.load_from_file(config_path)
    except FlexFormException as e:
        raise click.ClickException(str(e))

    setup_log(cfg.log_file)
    logger.info(f"Loaded configuration file: {config_path}")
    return cfg


@click.group()
@click.option(
    "--config", "-c", default=CONFIG_PATH_DEFAULT, help="Configuration file path"
)
@click.pass_context
def cli(ctx, config: str):
    """FlexForm - derive form field descriptors from model definitions."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


@cli.command(name="resolve")
@click.argument("object_name")
@click.argument("form_name")
@click.pass_context
def resolve(ctx, object_name: str, form_name: str):
    """Print the field descriptors of a form as JSON."""
    cfg = load_config(ctx)
    try:
        resolver = FieldMappingResolver(cfg.get_registry())
        descriptors = resolver.resolve(object_name, form_name)
    except FlexFormException as e:
        raise click.ClickException(str(e))

    click.echo(
        json.dumps([d.to_dict() for d in descriptors], indent=2, ensure_ascii=False)
    )


@cli.command(name="check")
@click.pass_context
def check(ctx):
    """Resolve every configured form and report broken ones."""
    cfg = load_config(ctx)
    try:
        registry = cfg.get_registry()
    except FlexFormException as e:
        raise click.ClickException(str(e))

    resolver = FieldMappingResolver(registry)
    failed = 0
    for obj in registry.objects():
        for form in obj.forms:
            try:
                descriptors = resolver.resolve(obj.name, form.name)
            except FlexFormException as e:
                failed += 1
                click.echo(f"{obj.name}\t{form.name}\terror: {e}")
            else:
                click.echo(f"{obj.name}\t{form.name}\tok ({len(descriptors)} fields)")

    if failed:
        raise click.ClickException(f"{failed} form(s) failed to resolve")


@cli.command(name="list-forms")
@click.pass_context
def list_forms(ctx):
    """List the configured forms."""
    cfg = load_config(ctx)
    click.echo("object\tform\tfields")
    for obj in cfg.objects:
        for form in obj.forms:
            click.echo(f"{obj.name}\t{form.name}\t{len(form.fields)}")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
