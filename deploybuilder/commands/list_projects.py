import click
import os
from .. import projects
from ..cli_logger import logger
from ..decorators import handle_exceptions

@click.command(name="list-projects")
@click.option("--top-level", is_flag=True, help="Only look at the top directory.")
@click.pass_context
@handle_exceptions
def list_projects(ctx, top_level):
    """List project files in the repository."""
    repository_root = os.path.abspath(ctx.obj["path"])
    found = False
    for project in projects.find_projects(repository_root, recursive=not top_level):
        found = True
        capability = "web application" if project.is_compiled_application else "not deployable"
        click.echo(f"{os.path.relpath(project.path, repository_root)} [{capability}]")
    if not found:
        logger.info(f"No project files found in {repository_root}.")
