"""
Errors raised while resolving which builder deploys a repository.

Every error carries an ErrorKind so callers can branch on the kind instead
of matching on the message, which is meant for end users.
"""
import enum


class ErrorKind(enum.Enum):
    AMBIGUOUS_SOLUTION = "ambiguous_solution"
    AMBIGUOUS_PROJECT = "ambiguous_project"
    INVALID_PROJECT = "invalid_project"
    PROJECT_NOT_FOUND = "project_not_found"
    MISSING_PATH = "missing_path"


class ResolutionError(Exception):
    """Base exception for deployment target resolution errors"""
    kind = None

    def __init__(self, message, path=None, candidates=()):
        super().__init__(message)
        self.message = message
        self.path = path
        self.candidates = tuple(candidates)

    def __eq__(self, other):
        if not isinstance(other, ResolutionError):
            return NotImplemented
        return (self.kind, self.message, self.path, self.candidates) == \
            (other.kind, other.message, other.path, other.candidates)

    def __hash__(self):
        return hash((self.kind, self.message, self.path, self.candidates))


class AmbiguousSolutionError(ResolutionError):
    """Raised when more than one solution could be built"""
    kind = ErrorKind.AMBIGUOUS_SOLUTION

    def __init__(self, candidates):
        message = "Unable to determine which solution file to build."
        if candidates:
            message += " Candidates: " + ", ".join(candidates)
        super().__init__(message, candidates=candidates)


class AmbiguousProjectError(ResolutionError):
    """Raised when more than one project file could be built"""
    kind = ErrorKind.AMBIGUOUS_PROJECT

    def __init__(self, candidates):
        message = "Unable to determine which project file to build."
        if candidates:
            message += " Candidates: " + ", ".join(candidates)
        super().__init__(message, candidates=candidates)


class InvalidProjectError(ResolutionError):
    """Raised when the resolved project is not a web application project"""
    kind = ErrorKind.INVALID_PROJECT

    def __init__(self, path):
        super().__init__(f"'{path}' is not a deployable project.", path=path)


class ProjectNotFoundError(ResolutionError):
    """Raised when the resolved project file is not on disk"""
    kind = ErrorKind.PROJECT_NOT_FOUND

    def __init__(self, path):
        super().__init__(f"Unable to find target project '{path}'.", path=path)


class MissingPathError(ResolutionError):
    """Raised when the configured project path does not exist"""
    kind = ErrorKind.MISSING_PATH

    def __init__(self, path):
        super().__init__(f"The specified path '{path}' doesn't exist.", path=path)
