import click
import os
import shutil
import sys
import tempfile
from .. import config as config_module
from .. import executor
from .. import resolver
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..utils import clean_directory, is_within

def _parse_properties(ctx, param, value):
    properties = {}
    for item in value:
        key, sep, val = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"'{item}' is not in KEY=VALUE form.")
        properties[key.strip()] = val
    return properties

@click.command()
@click.option("--output", "-o", required=True, type=click.Path(file_okay=False), help="Directory to deploy the site into.")
@click.option("--project", default=None, help="Project path to deploy, relative to the repository root. Overrides .deployment.toml.")
@click.option("--temp-path", default=None, type=click.Path(file_okay=False), help="Working directory for build output.")
@click.option("--property", "properties", multiple=True, callback=_parse_properties, help="Build property as KEY=VALUE. Can be repeated.")
@click.option("--dry-run", is_flag=True, help="Only show what would be done.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
@handle_exceptions
def build(ctx, output, project, temp_path, properties, dry_run, verbose):
    """Resolve the builder for the repository and deploy it into the output directory."""
    repository_root = os.path.abspath(ctx.obj["path"])
    conf = config_module.load_config(path=repository_root)
    override = project or config_module.get_project_override(conf)

    builder = resolver.resolve(repository_root, override).unwrap()
    build_properties = config_module.get_build_properties(conf, properties)

    if temp_path:
        for protected in (repository_root, os.path.abspath(output)):
            if is_within(protected, temp_path):
                logger.error(f"Error: --temp-path {os.path.abspath(temp_path)} would remove {protected}. Choose a directory outside the repository and the output.")
                sys.exit(1)
        clean_directory(temp_path)
    working_path = temp_path or tempfile.mkdtemp(prefix="deploybuilder_")
    try:
        deployed = executor.execute(builder,
                                    os.path.abspath(output),
                                    os.path.abspath(working_path),
                                    properties=build_properties,
                                    msbuild=config_module.get_msbuild(conf),
                                    dry_run=dry_run,
                                    verbose=verbose)
    finally:
        if not temp_path:
            shutil.rmtree(working_path, ignore_errors=True)

    if not deployed:
        logger.error("Deployment failed. Please check the logs for details.")
        sys.exit(1)
