#!/usr/bin/env python3
"""
VolumeCtl - Management tool for container runtime volumes.
"""
import sys
import logging
from typing import Optional

import click

from volumectl import __version__ as VERSION
from volumectl.core.config import load_config
from volumectl.core.exceptions import VolumeCtlError
from volumectl.core.runner import CommandRunner
from volumectl.core.utils import get_log_file, setup_logging
from volumectl.core.volume import VolumeManager
from volumectl.ui.console import ConsoleUI

ui = ConsoleUI()
logger = logging.getLogger(__name__)


def get_manager(ctx) -> VolumeManager:
    """Return the VolumeManager built for this invocation."""
    return ctx.obj['MANAGER']


def run_operation(operation, *args):
    """Run a manager operation, printing domain errors and exiting non-zero."""
    try:
        return operation(*args)
    except VolumeCtlError as e:
        logger.error(f"{operation.__name__} failed: {e}")
        ui.print_error(e)
        sys.exit(1)


# CLI Commands
@click.group()
@click.version_option(version=VERSION)
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='Path to a YAML config file')
@click.pass_context
def cli(ctx, debug, config_path):
    """VolumeCtl - Manage container volumes and the files inside them"""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except VolumeCtlError as e:
        ui.print_error(e)
        sys.exit(1)

    debug = debug or config.debug
    setup_logging(debug, config.log_dir)
    if debug:
        logger.debug("Debug mode enabled")
        logger.debug(f"Using backend: {config.backend}")

    ctx.obj['DEBUG'] = debug
    ctx.obj['CONFIG'] = config
    ctx.obj.setdefault(
        'MANAGER',
        VolumeManager(config.backend, CommandRunner(timeout=config.command_timeout))
    )


@cli.command(name='list')
@click.option('--json', 'as_json', is_flag=True, help='Print names as JSON')
@click.pass_context
def list_volumes(ctx, as_json: bool):
    """List volumes"""
    names = run_operation(get_manager(ctx).list)
    if as_json:
        ui.print_json(names)
    else:
        ui.display_volume_list(names)


@cli.command()
@click.argument('name')
@click.option('--json', 'as_json', is_flag=True, help='Print details as JSON')
@click.pass_context
def show(ctx, name: str, as_json: bool):
    """Show details of a volume"""
    summary = run_operation(get_manager(ctx).show, name)
    if as_json:
        ui.print_json(summary.as_dict())
    else:
        ui.display_volume_details(summary)


@cli.command()
@click.argument('name')
@click.pass_context
def add(ctx, name: str):
    """Create a volume"""
    run_operation(get_manager(ctx).add, name)
    ui.print_success(f"Volume {name} created")


@cli.command()
@click.argument('name')
@click.pass_context
def remove(ctx, name: str):
    """Remove a volume"""
    run_operation(get_manager(ctx).remove, name)
    ui.print_success(f"Volume {name} removed")


@cli.command()
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def prune(ctx, yes: bool):
    """Remove unused volumes"""
    if not yes and not click.confirm("This will remove all unused volumes. Continue?"):
        return
    run_operation(get_manager(ctx).prune)
    ui.print_success("Unused volumes pruned")


@cli.command()
@click.argument('name')
@click.argument('path', required=False)
@click.pass_context
def ls(ctx, name: str, path: Optional[str]):
    """List files in a volume"""
    entries = run_operation(get_manager(ctx).browse, name, path)
    ui.display_entries(entries, f"{name}:{path or '/'}")


@cli.command()
@click.argument('name')
@click.argument('path', required=False)
@click.pass_context
def cat(ctx, name: str, path: Optional[str]):
    """Print a file from a volume"""
    content = run_operation(get_manager(ctx).read_file, name, path)
    ui.display_file(content)


@cli.command()
@click.argument('name')
@click.argument('path', required=False)
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def rm(ctx, name: str, path: Optional[str], yes: bool):
    """Delete a file or directory from a volume"""
    if path and not yes and not click.confirm(f"Delete {path} from volume {name}?"):
        return
    if run_operation(get_manager(ctx).delete_path, name, path):
        ui.print_success(f"Deleted {path} from {name}")
    else:
        ui.print_error(f"Unable to delete {path} from {name}")
        sys.exit(1)


@cli.command(name='fix-permissions')
@click.argument('name')
@click.pass_context
def fix_permissions(ctx, name: str):
    """Make all files in a volume writable"""
    if run_operation(get_manager(ctx).fix_permissions, name):
        ui.print_success(f"Permissions fixed on {name}")
    else:
        ui.print_error(f"Unable to fix permissions on {name}")
        sys.exit(1)


@cli.command()
@click.option('--lines', '-n', default=50, help='Number of lines to show')
def show_logs(lines: int):
    """Show VolumeCtl logs"""
    log_file = get_log_file()
    if log_file is None or not log_file.exists():
        ui.print_warning("No log file found")
        return
    try:
        with open(log_file) as f:
            content = f.readlines()
    except OSError as e:
        ui.print_error(e)
        sys.exit(1)
    if lines <= 0:
        return
    # Show last n lines
    for line in content[-lines:]:
        ui.console.print(line.rstrip(), highlight=False, markup=False)


@cli.command()
def clear_logs():
    """Clear VolumeCtl logs"""
    log_file = get_log_file()
    if log_file is None:
        ui.print_warning("No log file found")
        return
    try:
        with open(log_file, 'w'):
            pass
    except OSError as e:
        ui.print_error(e)
        sys.exit(1)
    ui.print_success("Logs cleared successfully")


if __name__ == '__main__':
    cli()
