"""
Solution discovery.

A solution file groups project files. Its member projects are kept in the
order the solution declares them.
"""
import os
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from . import projects
from .cli_logger import logger
from .projects import ProjectDescriptor

SOLUTION_FILE_EXTENSION = ".sln"

SOLUTION_FOLDER_GUID = "{2150e333-8fdc-42a3-9474-1a3956d46de8}"

PROJECT_LINE = re.compile(
    r'^\s*Project\("(?P<type>\{[^}]*\})"\)\s*=\s*'
    r'"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*)"\s*,\s*"(?P<guid>[^"]*)"'
)


@dataclass(frozen=True)
class SolutionDescriptor:
    path: str
    projects: Tuple[ProjectDescriptor, ...] = ()

    def contains(self, project_path):
        target = _normalize(project_path)
        return any(_normalize(p.path) == target for p in self.projects)


def _normalize(path):
    return os.path.normcase(os.path.normpath(os.path.abspath(path)))


def _is_under(path, target):
    path, target = _normalize(path), _normalize(target)
    return path == target or path.startswith(target.rstrip(os.sep) + os.sep)


def _member_project(solution_dir, type_guid, relative_path):
    if "://" in relative_path:
        return None
    relative_path = relative_path.replace("\\", os.sep).rstrip(os.sep)
    path = os.path.normpath(os.path.join(solution_dir, relative_path))

    if type_guid == projects.WEBSITE_PROJECT_GUID:
        if not os.path.isdir(path):
            return None
        return ProjectDescriptor(path=path, is_loose_site=True)

    if not os.path.isfile(path):
        return None
    return projects.describe_project(path)


def parse_solution(path):
    """
    Read a solution file into a SolutionDescriptor.

    References that point nowhere on disk are dropped.
    """
    path = os.path.abspath(path)
    solution_dir = os.path.dirname(path)
    members = []
    with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
        for line in f:
            match = PROJECT_LINE.match(line)
            if not match:
                continue
            type_guid = match.group("type").lower()
            if type_guid == SOLUTION_FOLDER_GUID:
                continue
            project = _member_project(solution_dir, type_guid, match.group("path"))
            if project is not None:
                members.append(project)
    return SolutionDescriptor(path=path, projects=tuple(members))


def find_all_solutions(root_path):
    """
    Return every solution under root_path, in sorted walk order.

    Dangling links and unreadable solution files are skipped with a warning.
    """
    solutions = []
    for dirpath, filenames in projects.walk_sorted(os.path.abspath(root_path), recursive=True):
        for filename in filenames:
            if not filename.lower().endswith(SOLUTION_FILE_EXTENSION):
                continue
            path = os.path.join(dirpath, filename)
            if not os.path.isfile(path):
                logger.warning(f"Skipping solution {path}: not a readable file.")
                continue
            try:
                solutions.append(parse_solution(path))
            except OSError as e:
                logger.warning(f"Skipping solution {path}: {e}")
    return solutions


def find_solutions_containing(root_path, target_path):
    """Return the solutions with a member project at or under target_path."""
    return [
        solution for solution in find_all_solutions(root_path)
        if any(_is_under(p.path, target_path) for p in solution.projects)
    ]


def find_containing_solution(root_path, project_path) -> Optional[SolutionDescriptor]:
    """Return the first solution that lists project_path, or None."""
    for solution in find_all_solutions(root_path):
        if solution.contains(project_path):
            return solution
    return None
