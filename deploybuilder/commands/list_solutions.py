import click
import os
from .. import solutions
from ..cli_logger import logger
from ..decorators import handle_exceptions

def _capability(project):
    if project.is_compiled_application:
        return "web application"
    if project.is_loose_site:
        return "website"
    return "not deployable"

@click.command(name="list-solutions")
@click.pass_context
@handle_exceptions
def list_solutions(ctx):
    """List solution files in the repository and the projects they contain."""
    repository_root = os.path.abspath(ctx.obj["path"])
    found = solutions.find_all_solutions(repository_root)
    if not found:
        logger.info(f"No solution files found in {repository_root}.")
        return
    for solution in found:
        click.echo(os.path.relpath(solution.path, repository_root))
        for project in solution.projects:
            click.echo(f"  {os.path.relpath(project.path, repository_root)} [{_capability(project)}]")
