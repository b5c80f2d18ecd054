import click
import os
import sys
import json
from .. import config as config_module
from ..cli_logger import logger

MISSING_CONFIG = f"Error: No {config_module.CONFIG_FILE} found. Please run 'deploybuilder init' first."

@click.group()
@click.pass_context
def config(ctx):
    """View or edit the .deployment.toml configuration file."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """View the contents of the .deployment.toml file."""
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    if not os.path.exists(config_file_path):
        logger.error(MISSING_CONFIG)
        return
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading {config_module.CONFIG_FILE} at {config_file_path}: {e}")
        logger.info("Please check file permissions.")

@config.command()
@click.pass_context
def edit(ctx):
    """Edit the .deployment.toml file in your default editor."""
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    if not os.path.exists(config_file_path):
        logger.error(MISSING_CONFIG)
        return
    try:
        click.edit(filename=config_file_path)
    except click.ClickException as e:
        logger.error(f"Click error editing {config_module.CONFIG_FILE}: {e}")
        logger.info("This might indicate an issue with your editor configuration or environment variables.")
    except Exception as e:
        logger.error(f"An unexpected error occurred while editing {config_module.CONFIG_FILE}: {e}")
        logger.exception(*sys.exc_info())

@config.command(name="list")
@click.pass_context
def list_values(ctx):
    """List all configuration keys and values."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(MISSING_CONFIG)
        return
    click.echo(json.dumps(conf, indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value such as 'config.project' from the configuration."""
    conf = config_module.load_config(path=ctx.obj["path"])
    value = config_module.get_value(conf, key)
    if value is None:
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
        return
    if isinstance(value, dict):
        click.echo(json.dumps(value, indent=4))
    else:
        click.echo(value)

@config.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a value in the .deployment.toml file, creating it if needed."""
    conf = config_module.load_config(path=ctx.obj["path"])
    d = conf
    for k in key.split('.')[:-1]:
        d = d.setdefault(k, {})
    d[key.split('.')[-1]] = value

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")

@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove a key from the .deployment.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(MISSING_CONFIG)
        return

    keys = key.split('.')
    d = conf
    try:
        for k in keys[:-1]:
            d = d[k]
        del d[keys[-1]]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
        return
    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Unset '{key}'")
