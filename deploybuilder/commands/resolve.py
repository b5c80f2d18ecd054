import click
import json
import os
from .. import config as config_module
from .. import resolver
from ..builders import to_dict
from ..cli_logger import logger
from ..decorators import handle_exceptions

@click.command()
@click.option("--project", default=None, help="Project path to deploy, relative to the repository root. Overrides .deployment.toml.")
@click.option("--json", "as_json", is_flag=True, help="Print the selected builder as JSON.")
@click.pass_context
@handle_exceptions
def resolve(ctx, project, as_json):
    """Show which builder would deploy the repository."""
    repository_root = os.path.abspath(ctx.obj["path"])
    conf = config_module.load_config(path=repository_root)
    override = project or config_module.get_project_override(conf)
    if override:
        logger.info(f"Using project path '{override}' from the deployment configuration.")

    builder = resolver.resolve(repository_root, override).unwrap()

    if as_json:
        click.echo(json.dumps(to_dict(builder), indent=4))
    else:
        click.echo(f"{builder.kind.value}: {builder.describe()}")
