#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import argparse
import os
import sys
import traceback

from typing import Optional

sys.dont_write_bytecode = True

from tool_installer.tool_constants import PresentationMode, TOOL_INSTALLER_VERSION
from tool_installer.tool_common import UserInterfaceMode
from tool_installer.tool_utils import sanitize_name

from tool_installer.installer.args.basic_args import add_basic_args
from tool_installer.installer.args.install_files_args import add_install_files_args
from tool_installer.installer.args.presentation_args import add_presentation_args
from tool_installer.installer.args.service_args import add_service_args

from tool_installer.installer.actions.post_install import (
    create_systemd_service,
    resolve_service_exec_path,
    run_once,
)
from tool_installer.installer.actions.strategies import install_artifact

from tool_installer.installer.configs.constants.enums import InstallerResult, SourceMode

from tool_installer.installer.core.classifier import classify_artifact
from tool_installer.installer.core.install_context import InstallContext, InstallResult
from tool_installer.installer.core.lifecycle import InstallLifecycle

from tool_installer.installer.platforms import get_platform_installer

from tool_installer.installer.ui.tui.tui_installer_ui import TUIInstallerUI

from tool_installer.installer.utils.artifact_utils import fetch_artifact, verify_checksum
from tool_installer.installer.utils.exceptions import (
    FatalEnvironmentError,
    FatalInputError,
    ToolInstallerError,
)
from tool_installer.installer.utils.file_utils import ensure_directory
from tool_installer.installer.utils.logger_utils import InstallerLogger


# step labels for START/SUCCESS/SKIP lines
STEP_INSTALL = "install"
STEP_RUN_ONCE = "run once"
STEP_SERVICE = "systemd service"


###################################################################################################
def build_arg_parser(parser: argparse.ArgumentParser) -> None:
    """Add arguments specific to the installer itself"""
    add_basic_args(parser)
    add_presentation_args(parser)
    add_install_files_args(parser)
    add_service_args(parser)
    parser.add_argument("--version", action="version", version=f"%(prog)s {TOOL_INSTALLER_VERSION}")


def determine_presentation_mode(parsed_args: argparse.Namespace) -> PresentationMode:
    """Determine which interface mode to use based on args."""
    if parsed_args.non_interactive:
        return PresentationMode.MODE_SILENT
    elif parsed_args.dui:
        return PresentationMode.MODE_DUI
    else:
        return PresentationMode.MODE_TUI


def create_ui_implementation(presentation_mode: PresentationMode) -> TUIInstallerUI:
    """Create the UI implementation for the interface mode.

    Silent mode still gets a prompt implementation; it accepts every default
    without asking.
    """
    if presentation_mode == PresentationMode.MODE_DUI:
        return TUIInstallerUI(UserInterfaceMode.InteractionDialog)
    elif presentation_mode == PresentationMode.MODE_SILENT:
        return TUIInstallerUI(UserInterfaceMode.InteractionInput, non_interactive=True)
    else:
        return TUIInstallerUI(UserInterfaceMode.InteractionInput)


def gather_source(ctx: InstallContext, ui) -> None:
    """Fill in the source mode and location, prompting for whatever is missing."""
    if ctx.source_mode is None:
        if ctx.non_interactive:
            raise FatalInputError("No source given; use --url or --file in non-interactive mode.")
        ctx.source_mode = ui.choose_source_mode()

    if ctx.source_mode == SourceMode.URL:
        if not ctx.url:
            ctx.url = ui.ask_url().strip()
        if not ctx.url:
            raise FatalInputError("No download URL provided.")
    else:
        if not ctx.local_path:
            ctx.local_path = ui.ask_local_path().strip()
        if not ctx.local_path:
            raise FatalInputError("No local file path provided.")


def resolve_tool_name(ctx: InstallContext, artifact, ui) -> str:
    suggested = sanitize_name(ctx.tool_name or artifact.basename)
    name = ctx.tool_name if ctx.tool_name else ui.ask_tool_name(suggested)
    name = sanitize_name((name or "").strip())
    if not name:
        raise FatalInputError("Tool name cannot be empty.")
    return name


def resolve_install_base(ctx: InstallContext, ui) -> str:
    install_base = ctx.install_base or ui.choose_install_base(ctx.bin_dir)
    install_base = (install_base or "").strip()
    if not install_base or not os.path.isabs(install_base):
        raise FatalInputError(f"Installation path must be absolute (got '{install_base}').")
    ensure_directory(install_base)
    return install_base


def run_post_install(
    ctx: InstallContext,
    result: InstallResult,
    ui,
    platform,
    lifecycle: InstallLifecycle,
) -> None:
    """Optional one-shot launch followed by optional systemd service creation."""
    InstallerLogger.start(STEP_RUN_ONCE)
    if result.has_executable():
        run_now = ctx.run_now if ctx.run_now is not None else ui.ask_run_now(result.installed_executable)
        if run_now and run_once(result.installed_executable, result.tool_name, ctx.log_dir, lifecycle):
            InstallerLogger.end(STEP_RUN_ONCE, InstallerResult.SUCCESS)
        elif run_now:
            InstallerLogger.end(STEP_RUN_ONCE, InstallerResult.FAILURE, "launch failed")
        else:
            InstallerLogger.end(STEP_RUN_ONCE, InstallerResult.SKIPPED, "declined")
    else:
        if ctx.run_now:
            InstallerLogger.warning("No installed executable is known; skipping the run-once launch.")
        InstallerLogger.end(STEP_RUN_ONCE, InstallerResult.SKIPPED, "no installed executable")

    InstallerLogger.start(STEP_SERVICE)
    create_service = ctx.create_service if ctx.create_service is not None else ui.ask_create_service()
    if not create_service:
        InstallerLogger.end(STEP_SERVICE, InstallerResult.SKIPPED, "declined")
        return

    service_name = ctx.service_name if ctx.service_name else ui.ask_service_name(result.tool_name)
    service_name = sanitize_name((service_name or "").strip()) or result.tool_name
    exec_path = resolve_service_exec_path(result, ctx.bin_dir, ui)
    unit_file = create_systemd_service(service_name, exec_path, ctx.unit_dir, platform, lifecycle)
    InstallerLogger.end(STEP_SERVICE, InstallerResult.SUCCESS, unit_file)


def run_installation(ctx: InstallContext, ui, platform, lifecycle: InstallLifecycle) -> InstallResult:
    """Source, verify, classify, install and post-install, in that order."""
    gather_source(ctx, ui)
    location = ctx.url if ctx.source_mode == SourceMode.URL else ctx.local_path
    artifact = fetch_artifact(ctx.source_mode, location, platform, lifecycle)

    tool_name = resolve_tool_name(ctx, artifact, ui)
    lifecycle.record_event(f"Tool name: {tool_name}")

    if ctx.sha256 is None and not ctx.non_interactive:
        ctx.sha256 = ui.ask_checksum()
    verify_checksum(artifact, ctx.sha256, lifecycle)

    install_base = resolve_install_base(ctx, ui)
    lifecycle.record_event(f"Install base: {install_base}")

    InstallerLogger.start(STEP_INSTALL)
    kind = classify_artifact(artifact.path, lifecycle)
    result = install_artifact(artifact, kind, install_base, tool_name, lifecycle, platform, ctx.bin_dir)
    InstallerLogger.end(STEP_INSTALL, InstallerResult.SUCCESS, result.install_dir or result.package_name or tool_name)

    run_post_install(ctx, result, ui, platform, lifecycle)

    lifecycle.record_event(f"Installation steps completed for {tool_name}.")
    return result


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="0x Tool Installer", conflict_handler="resolve")
    build_arg_parser(parser)
    parsed_args = parser.parse_args(argv)

    if parsed_args.quiet:
        InstallerLogger.set_console_output(False)
    if parsed_args.debug:
        InstallerLogger.set_debug_enabled(True)

    lifecycle = InstallLifecycle(parsed_args.log_file, parsed_args.fail_marker)
    ctx = InstallContext.from_args(parsed_args)

    try:
        ui = create_ui_implementation(determine_presentation_mode(parsed_args))
        try:
            platform = get_platform_installer(ui, parsed_args.debug)
        except NotImplementedError as e:
            raise FatalEnvironmentError(str(e)) from e

        if not platform.is_privileged():
            raise FatalEnvironmentError("Please run as root (sudo).")

        lifecycle.begin()
        InstallerLogger.debug(f"Installer context: {ctx}")
        run_installation(ctx, ui, platform, lifecycle)

    except ToolInstallerError as e:
        InstallerLogger.debug(traceback.format_exc())
        return lifecycle.fail(e.exit_code, str(e))

    except KeyboardInterrupt:
        # an interrupt leaves the marker and log as they were
        InstallerLogger.error("Installation cancelled by user.")
        return 1

    except Exception as e:
        InstallerLogger.debug(traceback.format_exc())
        return lifecycle.fail(1, f"Unexpected error: {e}")

    return lifecycle.succeed()


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
