"""
Builder variants a repository can be deployed with.

A resolved builder only names the paths it works on. Running it is the job of
deploybuilder.executor, which dispatches on the builder's kind.
"""
import enum
from dataclasses import dataclass, field, asdict
from typing import Optional, Union


class BuilderKind(enum.Enum):
    COMPILED_PROJECT = "compiled_project"
    LOOSE_SITE = "loose_site"
    FILE_COPY = "file_copy"


@dataclass(frozen=True)
class CompiledProjectBuilder:
    """Builds a single web application project file."""
    repository_root: str
    project_path: str
    solution_path: Optional[str] = None
    kind: BuilderKind = field(default=BuilderKind.COMPILED_PROJECT, init=False)

    def describe(self):
        if self.solution_path:
            return f"Building web project {self.project_path} (solution {self.solution_path})"
        return f"Building web project {self.project_path}"


@dataclass(frozen=True)
class LooseSiteBuilder:
    """Builds a website directory through the solution that lists it."""
    repository_root: str
    solution_path: str
    project_path: str
    kind: BuilderKind = field(default=BuilderKind.LOOSE_SITE, init=False)

    def describe(self):
        return f"Building website {self.project_path} (solution {self.solution_path})"


@dataclass(frozen=True)
class FileCopyBuilder:
    """Deploys files as they are."""
    source_path: str
    kind: BuilderKind = field(default=BuilderKind.FILE_COPY, init=False)

    def describe(self):
        return f"Copying files from {self.source_path}"


Builder = Union[CompiledProjectBuilder, LooseSiteBuilder, FileCopyBuilder]


def to_dict(builder):
    data = asdict(builder)
    data["kind"] = builder.kind.value
    return data
