import click
import os
from .. import config as config_module
from .. import projects
from ..cli_logger import logger


def _default_config(project_path):
    conf = {"build": {"msbuild": config_module.DEFAULT_MSBUILD, "properties": {}}}
    if project_path:
        conf["config"] = {"project": project_path}
    return conf


def _suggest_project(repository_root):
    """Offer the only deployable project in the repository, if there is exactly one."""
    deployable = [p for p in projects.find_projects(repository_root) if p.is_compiled_application]
    if len(deployable) == 1:
        return os.path.relpath(deployable[0].path, repository_root)
    return ""


@click.command()
@click.option('--project', default=None, help='Project path to deploy, relative to the repository root.')
@click.option('--non-interactive', is_flag=True, help='Do not prompt; leave the project path unset unless --project is given.')
@click.pass_context
def init(ctx, project, non_interactive):
    """Create a .deployment.toml for the repository."""
    repository_root = os.path.abspath(ctx.obj["path"])
    config_path = os.path.join(repository_root, config_module.CONFIG_FILE)

    if os.path.exists(config_path) and not non_interactive:
        if not click.confirm(f"{config_module.CONFIG_FILE} already exists. Overwrite it?", default=False):
            logger.info("Keeping the existing configuration.")
            return

    if project is None and not non_interactive:
        project = click.prompt("Project path to deploy (leave empty to detect it on every deployment)",
                               default=_suggest_project(repository_root), show_default=True)

    project = (project or "").strip()
    if project and not os.path.exists(os.path.join(repository_root, project)):
        logger.warning(f"'{project}' does not exist yet; deployments will fail until it does.")

    if config_module.save_config(_default_config(project), path=repository_root):
        logger.success(f"Created {config_path}")
