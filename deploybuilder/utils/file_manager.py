import os
import shutil
from ..cli_logger import logger

# Never deployed along with the site
EXCLUDED_NAMES = (".git", ".hg", ".svn", ".deployment", ".deployment.toml")

def _safe_join(base, *paths):
    """Safely join paths, preventing path traversal attacks."""
    base = os.path.abspath(base)
    final = os.path.abspath(os.path.join(base, *paths))
    if not final.startswith(base + os.sep) and final != base:
        raise IOError(f"Unsafe path detected: {final}")
    return final

def is_within(path, directory):
    """Return True if path is directory itself or lies somewhere below it."""
    path = os.path.normcase(os.path.abspath(path))
    directory = os.path.normcase(os.path.abspath(directory))
    return path == directory or path.startswith(directory.rstrip(os.sep) + os.sep)

def copy_file(source, dest_dir, log_each=True):
    """Copy a single file into dest_dir."""
    os.makedirs(dest_dir, exist_ok=True)
    target_path = _safe_join(dest_dir, os.path.basename(source))
    if log_each:
        logger.step_info(f"copying: {os.path.basename(source)}", indent=2)
    shutil.copy2(source, target_path)
    return target_path

def copy_tree(source_dir, dest_dir, log_each=False):
    """
    Copy the contents of source_dir into dest_dir, skipping repository metadata.

    A destination nested inside the source is not copied into itself.
    """
    source_dir = os.path.abspath(source_dir)
    dest_dir = os.path.abspath(dest_dir)
    os.makedirs(dest_dir, exist_ok=True)

    def _ignore(directory, names):
        ignored = set(n for n in names if n in EXCLUDED_NAMES)
        for name in names:
            if os.path.abspath(os.path.join(directory, name)) == dest_dir:
                ignored.add(name)
        if log_each:
            for name in sorted(set(names) - ignored):
                logger.step_info(f"copying: {os.path.relpath(os.path.join(directory, name), source_dir)}", indent=2)
        return ignored

    shutil.copytree(source_dir, dest_dir, ignore=_ignore, dirs_exist_ok=True)
    return dest_dir

def clean_directory(path):
    """Remove everything inside path, creating it if it does not exist."""
    if os.path.isdir(path):
        for name in os.listdir(path):
            item = _safe_join(path, name)
            if os.path.isdir(item) and not os.path.islink(item):
                shutil.rmtree(item)
            else:
                os.remove(item)
    else:
        os.makedirs(path, exist_ok=True)
    return path
