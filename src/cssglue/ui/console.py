"""Console output formatting utilities for cssglue."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from ..model import JobDescriptor


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False, verbose: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show per-job details and stack traces
            verbose: If True, show per-job details
        """
        self.debug = debug
        self.verbose = verbose

    def print_run_started(self, build_file: str, target_count: int, dry_run: bool = False) -> None:
        """Print run start information."""
        print("\nBUILD STARTED" + (" (dry run)" if dry_run else ""))
        print(f"Build file: {build_file}")
        print(f"Targets: {target_count}")
        print()

    def print_target_start(self, name: str) -> None:
        print(f"TARGET: {name}")

    def print_job_queued(self, job: JobDescriptor) -> None:
        """Per-job details, debug or verbose mode only."""
        if not (self.debug or self.verbose):
            return
        src = job.src if isinstance(job.src, str) else ", ".join(job.src)
        print(f"+ {job.name}")
        print(f"  + [{src} -> {job.dest}]")

    def print_queued(self, names: Iterable[str]) -> None:
        names = list(names)
        print(f"queued tasks: {', '.join(names) if names else '(none)'}")

    def print_results(self, results: dict[str, list[str]]) -> None:
        """Print final results summary."""
        print("\n" + "=" * 40)
        print("RESULTS")
        print("=" * 40)
        for target, jobs in results.items():
            print(f"  {target}: {len(jobs)} job(s)")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
