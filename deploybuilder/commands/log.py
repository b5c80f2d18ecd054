import click
import os
from ..cli_logger import get_latest_log_file, LOG_DIR
from colorama import Fore, Style

LEVEL_COLORS = (
    ("[ERROR]", Fore.RED),
    ("[TRACEBACK]", Fore.RED),
    ("[WARNING]", Fore.YELLOW),
    ("[SUCCESS]", Fore.GREEN),
    ("[DEBUG]", Fore.WHITE + Style.DIM),
)

def _line_color(line):
    for marker, color in LEVEL_COLORS:
        if marker in line:
            return color
    return Fore.CYAN

@click.command()
@click.option('--filename', default=None, help='Name of the deployment log to display.')
@click.option('--list', 'list_files', is_flag=True, help='List all deployment logs.')
def log(filename, list_files):
    """Show the latest deployment log, a specific one, or list them all."""
    if list_files:
        log_files = sorted(f for f in os.listdir(LOG_DIR) if f.endswith(".log")) if os.path.isdir(LOG_DIR) else []
        if not log_files:
            click.echo("No log files found.")
            return
        click.echo("Available log files:")
        for f in log_files:
            click.echo(f"  {f}")
        return

    log_file = os.path.join(LOG_DIR, filename) if filename else get_latest_log_file()
    if not log_file or not os.path.exists(log_file):
        click.echo("No log files found.")
        return

    click.echo(f"Displaying log file: {log_file}")
    try:
        with open(log_file, 'r') as f:
            for line in f:
                click.echo(f"{_line_color(line)}{line.rstrip()}{Style.RESET_ALL}")
    except IOError as e:
        click.echo(f"Error reading log file {log_file}: {e}", err=True)
