import click
import importlib.metadata
import sys
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of the DeployBuilder tool."""
    try:
        ver = importlib.metadata.version("deploybuilder")
        logger.info(f"DeployBuilder version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of DeployBuilder. Is it installed correctly?")
    except Exception as e:
        logger.error(f"An unexpected error occurred while determining DeployBuilder version: {e}")
        logger.exception(*sys.exc_info())
