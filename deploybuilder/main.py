import click
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the repository root.")
@click.pass_context
def cli(ctx, path):
    """DeployBuilder CLI tool."""
    ctx.obj = {"path": path}

cli.add_command(resolve)
cli.add_command(build)
cli.add_command(list_projects)
cli.add_command(list_solutions)
cli.add_command(init)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
