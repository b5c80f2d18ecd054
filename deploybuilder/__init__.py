"""Selects and runs the builder that deploys a pushed repository."""
from .builders import BuilderKind, CompiledProjectBuilder, LooseSiteBuilder, FileCopyBuilder
from .errors import (
    ErrorKind,
    ResolutionError,
    AmbiguousSolutionError,
    AmbiguousProjectError,
    InvalidProjectError,
    ProjectNotFoundError,
    MissingPathError,
)
from .resolver import ResolutionResult, resolve, resolve_builder

__all__ = [
    'BuilderKind',
    'CompiledProjectBuilder',
    'LooseSiteBuilder',
    'FileCopyBuilder',
    'ErrorKind',
    'ResolutionError',
    'AmbiguousSolutionError',
    'AmbiguousProjectError',
    'InvalidProjectError',
    'ProjectNotFoundError',
    'MissingPathError',
    'ResolutionResult',
    'resolve',
    'resolve_builder',
]
