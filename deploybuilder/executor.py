import os
import shutil
import sys
from .builders import BuilderKind
from .cli_logger import logger
from .config import DEFAULT_MSBUILD
from .utils import run_shell_command, copy_tree, copy_file
from .utils.command_executor import format_command


def _property_arguments(properties):
    return [f"/p:{key}={value}" for key, value in (properties or {}).items()]


def compiled_project_command(builder, working_path, properties=None, msbuild=DEFAULT_MSBUILD):
    """Build a web application project into working_path."""
    command = [
        msbuild,
        builder.project_path,
        "/nologo",
        "/verbosity:m",
        "/t:pipelinePreDeployCopyAllFilesToOneFolder",
        f"/p:_PackageTempDir={working_path}",
        "/p:AutoParameterizationWebConfigConnectionStrings=false",
    ]
    if builder.solution_path:
        command.append(f"/p:SolutionDir={os.path.dirname(builder.solution_path)}{os.sep}")
    return command + _property_arguments(properties)


def loose_site_command(builder, properties=None, msbuild=DEFAULT_MSBUILD):
    """Build the solution that owns a website so its references are in place."""
    return [msbuild, builder.solution_path, "/nologo", "/verbosity:m"] + _property_arguments(properties)


def _run(command, cwd, dry_run, verbose):
    logger.info(f"Running: {format_command(command)}")
    if dry_run:
        return True
    output, return_code = run_shell_command(command, stream_output=verbose, cwd=cwd)
    if return_code != 0:
        logger.error(f"Build failed with exit code {return_code}.")
        if not verbose and output:
            for line in output.splitlines()[-20:]:
                logger.step_info(line, indent=2)
        return False
    return True


def _deploy_files(source, deploy_path, dry_run, verbose):
    logger.info(f"Deploying {source} to {deploy_path}")
    if dry_run:
        return True
    try:
        if os.path.isfile(source):
            copy_file(source, deploy_path, log_each=verbose)
        else:
            copy_tree(source, deploy_path, log_each=verbose)
    except (OSError, shutil.Error) as e:
        logger.error(f"Error copying files to {deploy_path}: {e}")
        logger.exception(*sys.exc_info())
        return False
    return True


def execute(builder, deploy_path, working_path, properties=None, msbuild=DEFAULT_MSBUILD, dry_run=False, verbose=False):
    """
    Run a resolved builder.

    Args:
        builder: Builder returned by the resolver
        deploy_path: Directory the site ends up in
        working_path: Scratch directory for build output
        properties: Build properties passed to the build tool unchanged
        msbuild: Build tool executable
        dry_run: Only log what would be done
        verbose: Stream build output and every copied file

    Returns:
        True when the site was deployed
    """
    logger.info(builder.describe())

    if builder.kind is BuilderKind.COMPILED_PROJECT:
        command = compiled_project_command(builder, working_path, properties, msbuild)
        if not _run(command, builder.repository_root, dry_run, verbose):
            return False
        source = working_path
    elif builder.kind is BuilderKind.LOOSE_SITE:
        command = loose_site_command(builder, properties, msbuild)
        if not _run(command, builder.repository_root, dry_run, verbose):
            return False
        source = builder.project_path
    elif builder.kind is BuilderKind.FILE_COPY:
        source = builder.source_path
    else:
        logger.error(f"Error: Unsupported builder '{builder.kind}'.")
        return False

    if not _deploy_files(source, deploy_path, dry_run, verbose):
        return False
    logger.success(f"Deployment to {deploy_path} completed.")
    return True
