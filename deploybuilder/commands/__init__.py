from .resolve import resolve
from .build import build
from .list_projects import list_projects
from .list_solutions import list_solutions
from .init import init
from .config import config
from .log import log
from .version import version

__all__ = [
    'resolve',
    'build',
    'list_projects',
    'list_solutions',
    'init',
    'config',
    'log',
    'version',
]
