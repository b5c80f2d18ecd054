import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from .cli_logger import logger

PROJECT_FILE_EXTENSIONS = frozenset({".csproj", ".vbproj", ".fsproj"})

# Project type GUIDs, lower-cased
WAP_PROJECT_GUID = "{349c5851-65df-11da-9384-00065b846f21}"
WEBSITE_PROJECT_GUID = "{e24c65dc-7377-472b-9aba-bc803b73c61a}"

WEB_SDKS = frozenset({
    "microsoft.net.sdk.web",
    "microsoft.net.sdk.razor",
    "microsoft.net.sdk.blazorwebassembly",
})

IGNORED_DIRECTORIES = frozenset({".git", ".hg", ".svn"})


@dataclass(frozen=True)
class ProjectDescriptor:
    path: str
    is_compiled_application: bool = False
    is_loose_site: bool = False

    @property
    def is_deployable(self):
        # exactly one capability
        return self.is_compiled_application != self.is_loose_site


def is_project(path):
    """Return True if the path names a recognized project file."""
    return os.path.splitext(path)[1].lower() in PROJECT_FILE_EXTENSIONS


def _local_name(tag):
    return tag.rsplit("}", 1)[-1]


def _project_type_guids(root):
    guids = []
    for element in root.iter():
        if _local_name(element.tag) == "ProjectTypeGuids" and element.text:
            guids.extend(g.strip().lower() for g in element.text.split(";") if g.strip())
    return guids


def _declares_web_sdk(root):
    sdk = root.get("Sdk", "")
    if sdk.split("/")[0].strip().lower() in WEB_SDKS:
        return True
    for element in root:
        if _local_name(element.tag) == "Sdk" and element.get("Name", "").lower() in WEB_SDKS:
            return True
    return False


def is_compiled_application(path):
    """Check if the project file describes a web application that needs a build."""
    try:
        root = ET.parse(path).getroot()
    except (ET.ParseError, OSError) as e:
        logger.warning(f"Could not read project file {path}: {e}")
        return False
    if _declares_web_sdk(root):
        return True
    return WAP_PROJECT_GUID in _project_type_guids(root)


def is_deployable_project(path):
    """Return True for an existing project file with the compiled-application capability."""
    return is_project(path) and os.path.isfile(path) and is_compiled_application(path)


def describe_project(path):
    path = os.path.abspath(path)
    return ProjectDescriptor(path=path, is_compiled_application=is_deployable_project(path))


def walk_sorted(root_path, recursive=True):
    """Walk root_path in a stable order, skipping version-control directories."""
    for dirpath, dirnames, filenames in os.walk(root_path):
        dirnames[:] = sorted(d for d in dirnames if d not in IGNORED_DIRECTORIES)
        yield dirpath, sorted(filenames)
        if not recursive:
            break


def find_projects(root_path, recursive=True):
    """
    Yield a ProjectDescriptor for every project file under root_path.

    Args:
        root_path: Directory to scan. A missing directory yields nothing.
        recursive: Scan the whole subtree instead of the top directory only.
    """
    for dirpath, filenames in walk_sorted(os.path.abspath(root_path), recursive):
        for filename in filenames:
            if is_project(filename):
                yield describe_project(os.path.join(dirpath, filename))
