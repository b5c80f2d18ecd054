"""
Deployment target resolution.

Decides which builder deploys a repository: an explicit project path from the
deployment configuration wins, then a single solution, then a single project
file, and finally a plain file copy.
"""
import os
from dataclasses import dataclass
from typing import Optional

from . import projects
from . import solutions
from .builders import Builder, CompiledProjectBuilder, LooseSiteBuilder, FileCopyBuilder
from .cli_logger import logger
from .utils import is_within
from .errors import (
    ResolutionError,
    AmbiguousSolutionError,
    AmbiguousProjectError,
    InvalidProjectError,
    ProjectNotFoundError,
    MissingPathError,
)


@dataclass(frozen=True)
class ResolutionResult:
    """Either the selected builder or the reason none could be selected."""
    builder: Optional[Builder] = None
    error: Optional[ResolutionError] = None

    def __post_init__(self):
        if (self.builder is None) == (self.error is None):
            raise ValueError("A resolution result needs exactly one of builder or error")

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.builder


def override_path(repository_root, override):
    """Turn a configured project path into an absolute path inside the repository."""
    if os.path.isabs(override) and os.path.commonpath(
            [os.path.abspath(override), repository_root]) == repository_root:
        return os.path.normpath(override)
    return os.path.normpath(os.path.join(repository_root, override.strip("/\\")))


def resolve(repository_root, override=None, log=logger):
    """
    Resolve the builder for a repository without raising.

    Args:
        repository_root: Root of the checked out repository
        override: Project path configured by the repository author, if any
        log: Sink for deployment notices

    Returns:
        ResolutionResult holding the builder or the ResolutionError
    """
    try:
        return ResolutionResult(builder=resolve_builder(repository_root, override, log))
    except ResolutionError as e:
        return ResolutionResult(error=e)


def resolve_builder(repository_root, override=None, log=logger):
    """Resolve the builder for a repository, raising a ResolutionError on failure."""
    repository_root = os.path.abspath(repository_root)

    if override:
        target_path = override_path(repository_root, override)
        if not is_within(target_path, repository_root):
            # Only paths inside the repository can be deployed
            raise MissingPathError(target_path)
        return _resolve_target(repository_root,
                               target_path,
                               allow_website_fallback=True,
                               recursive=False,
                               explicit=True)

    all_solutions = solutions.find_all_solutions(repository_root)

    if not all_solutions:
        return _resolve_target(repository_root,
                               repository_root,
                               allow_website_fallback=False,
                               recursive=True,
                               explicit=False)

    if len(all_solutions) > 1:
        raise AmbiguousSolutionError([s.path for s in all_solutions])

    solution = all_solutions[0]

    # First deployable project in declaration order
    project = next((p for p in solution.projects if p.is_deployable), None)

    if project is None:
        log.warning(f"Found solution {solution.path} with no deployable projects. Deploying files instead.")
        return FileCopyBuilder(source_path=repository_root)

    if project.is_compiled_application:
        return CompiledProjectBuilder(repository_root=repository_root,
                                      project_path=project.path,
                                      solution_path=solution.path)

    return LooseSiteBuilder(repository_root=repository_root,
                            solution_path=solution.path,
                            project_path=project.path)


def _resolve_target(repository_root, target_path, allow_website_fallback, recursive, explicit):
    if projects.is_project(target_path):
        return _resolve_project(repository_root, target_path)

    candidates = list(projects.find_projects(target_path, recursive=recursive))
    if len(candidates) > 1:
        raise AmbiguousProjectError([p.path for p in candidates])
    if len(candidates) == 1:
        return _resolve_project(repository_root, candidates[0].path)

    if allow_website_fallback:
        # Website projects need a solution to build
        containing = solutions.find_solutions_containing(repository_root, target_path)
        if len(containing) > 1:
            raise AmbiguousSolutionError([s.path for s in containing])
        if len(containing) == 1:
            return LooseSiteBuilder(repository_root=repository_root,
                                    solution_path=containing[0].path,
                                    project_path=target_path)

    if explicit and not os.path.exists(target_path):
        raise MissingPathError(target_path)

    return FileCopyBuilder(source_path=target_path)


def _resolve_project(repository_root, project_path):
    if not projects.is_deployable_project(project_path):
        raise InvalidProjectError(project_path)
    if not os.path.isfile(project_path):
        raise ProjectNotFoundError(project_path)

    solution = solutions.find_containing_solution(repository_root, project_path)
    return CompiledProjectBuilder(repository_root=repository_root,
                                  project_path=project_path,
                                  solution_path=solution.path if solution else None)
