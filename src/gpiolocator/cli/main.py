"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from gpiolocator import __version__

from .commands import lines_group

logger = logging.getLogger(__name__)

LOG_DIR = Path.home() / ".gpiolocator" / "logs"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Log file used for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "gpiolocator-debug.log"
    return LOG_DIR / "gpiolocator.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each); the TUI owns stdout
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


def run_dashboard(config) -> int:
    """
    Configure the lines, start the dashboard and block until it exits.

    Args:
        config: Validated AppConfig

    Returns:
        Process exit code

    Raises:
        TerminalUnavailableError: If stdin/stdout is not an interactive terminal
    """
    from gpiolocator.core import LineBank, PollingEngine
    from gpiolocator.exceptions import TerminalUnavailableError
    from gpiolocator.gpio import SysfsLineControl
    from gpiolocator.tui import LineLocator

    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise TerminalUnavailableError("stdin or stdout is not a TTY")

    bank = LineBank(SysfsLineControl(config.gpio_root), config.line_count, config.lock_timeout)
    engine = PollingEngine(bank, config.poll_interval)
    app = LineLocator(bank, engine, config)

    try:
        app.run()
    finally:
        # Textual restores the terminal itself; make sure polling stops on every path
        engine.stop()

    return app.return_code or 0


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="gpiolocator")
@click.option(
    '--count',
    '-n',
    type=click.IntRange(min=1),
    default=None,
    help='Number of GPIO lines to watch, rounded up to a multiple of 8 (default: 256)'
)
@click.option(
    '--poll-interval',
    type=float,
    default=None,
    help='Seconds between two samples of all lines (default: 0.25)'
)
@click.option(
    '--fps',
    type=float,
    default=None,
    help='Dashboard redraw rate (default: 60)'
)
@click.option(
    '--gpio-root',
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help='Sysfs GPIO directory (default: /sys/class/gpio)'
)
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Read settings from this JSON file (default: ~/.gpiolocator/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./gpiolocator-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    count: Optional[int],
    poll_interval: Optional[float],
    fps: Optional[float],
    gpio_root: Optional[Path],
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    GPIO line locator - watch sysfs GPIO input lines for level changes.

    Every line is shown as a cell in a grid of eight columns:

    \b
    - Yellow: changed since the last refresh
    - Green / Blue: stable high / stable low
    - Grey: not readable (or blocked)

    Press r to acknowledge changes, b to stop polling every changed line,
    j/k to scroll and q to quit.

    \b
    Examples:
      # Watch the first 256 lines
      gpiolocator

      # Watch 40 lines (rounded up to 40), sampling every 100ms
      gpiolocator --count 40 --poll-interval 0.1

      # One-shot reading without the dashboard
      gpiolocator lines list
    """
    # If a subcommand was invoked, don't run the dashboard
    if ctx.invoked_subcommand is not None:
        return

    from gpiolocator.models import AppConfig

    setup_logging(verbose, debug, log_file, log_level)
    log_path = resolve_log_path(debug, log_file)

    logger.info("Starting GPIO line locator")

    try:
        config = AppConfig.load_or_default(config_path).with_overrides(
            line_count=count,
            poll_interval=poll_interval,
            frames_per_second=fps,
            gpio_root=gpio_root,
        )
        exit_code = run_dashboard(config)

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
        exit_code = 0
    except click.Abort:
        raise
    except Exception as e:
        from gpiolocator.exceptions import format_error_for_display

        logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "=" * 70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("=" * 70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        sys.exit(1)

    if exit_code != 0:
        logger.error(f"Application exited with error code: {exit_code}")
    sys.exit(exit_code)


# Register utility commands
cli.add_command(lines_group)

if __name__ == "__main__":
    cli()
