"""
Centralized logging utility for the virtual authenticator package
Provides color-coded console output with consistent formatting
"""

# ANSI Color Codes
class Colors:
    """ANSI escape codes for terminal colors"""
    RESET = '\033[0m'
    ORANGE = '\033[38;5;214m'


class Logger:
    """
    Centralized logging with color support.

    Output can be silenced entirely with ``Logger.enabled = False`` (the test
    suites do this). Debug lines are only printed when ``Logger.verbose`` is set.
    """

    enabled: bool = True
    verbose: bool = False

    @staticmethod
    def _emit(line: str) -> None:
        if Logger.enabled:
            print(line)

    @staticmethod
    def debug(tag: str, message: str) -> None:
        """Print debug message with orange color (verbose mode only)"""
        if Logger.verbose:
            Logger._emit(f"{Colors.ORANGE}[{tag}]{Colors.RESET} {message}")
