import subprocess
import shlex
from ..cli_logger import logger

def format_command(command):
    """Render a command list the way it would be typed in a shell."""
    return " ".join(shlex.quote(str(part)) for part in command)

def run_shell_command(command, stream_output=False, env=None, cwd=None):
    """
    Executes a build command, optionally echoing its output line by line.

    Args:
        command (list): The command to execute as a list of strings.
        stream_output (bool): If True, each output line is written to the logger.
        env (dict, optional): A dictionary of environment variables.
        cwd (str, optional): The working directory for the command.

    Returns:
        A tuple (output, return_code). A command that cannot be started
        returns -1 as its return code.
    """
    try:
        process = subprocess.Popen(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            bufsize=1,
            universal_newlines=True,
            env=env,
            cwd=cwd
        )
    except FileNotFoundError as e:
        logger.error(f"Command not found: {e.filename}")
        return str(e), -1
    except OSError as e:
        logger.error(f"Could not start '{format_command(command)}': {e}")
        return str(e), -1

    lines = []
    for line in process.stdout:
        lines.append(line)
        if stream_output:
            logger.step_info(line.rstrip(), indent=2)
    process.wait()
    return "".join(lines), process.returncode
