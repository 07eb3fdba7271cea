# cli.py
from __future__ import annotations

import sys
from pathlib import Path

import click

from cssglue.engines import default_engines
from cssglue.errors import CssGlueError
from cssglue.queue import RecordingQueue, SyncQueue
from cssglue.runner import load_build, run_targets, select_targets
from cssglue.ui.console import Console, get_console, set_console

DEFAULT_BUILD_FILE = "cssglue_build.py"


def find_build_files() -> list[Path]:
    """Build files in the current directory: cssglue_build.py, then *_build.py."""
    build_files = []
    current_dir = Path(".")

    default_build = current_dir / DEFAULT_BUILD_FILE
    if default_build.exists():
        build_files.append(default_build)

    for path in current_dir.glob("*_build.py"):
        if path != default_build:
            build_files.append(path)

    return sorted(build_files)


def discover_build_file(build_arg: str | None) -> Path:
    """
    Discover the build file from argument or default.

    Raises:
        SystemExit: If no build file or more than one candidate is found
    """
    console = get_console()

    if build_arg:
        build_path = Path(build_arg)
        if not build_path.exists() and build_path.suffix != ".py":
            build_path = Path(str(build_path) + ".py")
        if not build_path.exists():
            console.print_error(
                "Build file not found",
                f"Could not find build file: {build_arg}",
                suggestion=f"Create a build file or specify a different path:\n  cssglue run --build {DEFAULT_BUILD_FILE}",
            )
            sys.exit(1)
        return build_path

    build_files = find_build_files()

    if len(build_files) == 0:
        console.print_error(
            "No build file found",
            "Could not find any build files.",
            details=["Looked for:", f"  {DEFAULT_BUILD_FILE}", "  *_build.py"],
            suggestion=f"Create a build file:\n  {DEFAULT_BUILD_FILE}\n\nOr specify one explicitly:\n  cssglue run --build my_build.py",
        )
        sys.exit(1)

    if len(build_files) > 1:
        file_list = "\n".join(f"  {f}" for f in build_files)
        console.print_error(
            "Multiple build files found",
            "Found multiple build files. Please specify which one to use:",
            details=[file_list],
            suggestion=f"Specify a build file explicitly:\n  cssglue run --build {DEFAULT_BUILD_FILE}",
        )
        sys.exit(1)

    return build_files[0]


def _execute(ctx: click.Context, build: str | None, target_names: tuple[str, ...], dry_run: bool) -> None:
    console = get_console()
    build_path = discover_build_file(build)

    try:
        selected = select_targets(load_build(build_path), target_names)
        console.print_run_started(build_file=build_path.name, target_count=len(selected), dry_run=dry_run)

        queue = RecordingQueue() if dry_run else SyncQueue(default_engines())
        results = run_targets(selected, queue, console=console)
        console.print_results(results)

    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except CssGlueError as e:
        console.print_error("Build failed", str(e))
        if ctx.obj.get("debug", False):
            console.print_exception(e)
        sys.exit(1)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show queued job details and stack traces)",
)
@click.pass_context
def cli(ctx, debug):
    """cssglue: compile, concatenate and minify stylesheets."""
    set_console(Console(debug=debug))
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@cli.command()
@click.option("--build", default=None, help=f"Build file path (defaults to {DEFAULT_BUILD_FILE} if present)")
@click.option("--target", "target_names", multiple=True, help="Only run this target (repeatable)")
@click.pass_context
def run(ctx, build, target_names):
    """Build stylesheet targets."""
    _execute(ctx, build, target_names, dry_run=False)


@cli.command()
@click.option("--build", default=None, help=f"Build file path (defaults to {DEFAULT_BUILD_FILE} if present)")
@click.option("--target", "target_names", multiple=True, help="Only plan this target (repeatable)")
@click.pass_context
def plan(ctx, build, target_names):
    """Show the jobs a build would queue, without running them."""
    get_console().verbose = True
    _execute(ctx, build, target_names, dry_run=True)


if __name__ == "__main__":
    cli()
