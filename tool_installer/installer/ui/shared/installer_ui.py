#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Abstract base class for installer UI implementations."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from tool_installer.tool_common import UserInterfaceMode
from tool_installer.tool_constants import DEFAULT_OPT_DIR
from tool_installer.installer.configs.constants.enums import InstallBaseChoice, SourceMode


class InstallerUI(ABC):
    """Abstract base class for installer UI implementations.

    This interface decouples the installer flow from the presentation layer,
    allowing the same flow to work with plain prompts, dialogs, or no prompts
    at all (non-interactive).
    """

    def __init__(
        self,
        ui_mode: UserInterfaceMode = UserInterfaceMode.InteractionInput,
        non_interactive: bool = False,
    ):
        """Initialize the UI interface.

        Args:
            ui_mode: The user interface mode for this implementation
            non_interactive: Accept every default without prompting
        """
        self.ui_mode = ui_mode
        self.non_interactive = non_interactive

    @abstractmethod
    def ask_yes_no(self, message: str, default: bool = False) -> bool:
        """Ask the user a yes/no question.

        Args:
            message: The question to ask the user
            default: Default answer if user just presses enter

        Returns:
            True for yes, False for no
        """
        pass

    @abstractmethod
    def ask_string(self, prompt: str, default: Optional[str] = None) -> str:
        """Ask the user for a string input.

        Args:
            prompt: The prompt to show the user
            default: Default value if user just presses enter

        Returns:
            The user's input string
        """
        pass

    @abstractmethod
    def choose_one(self, prompt: str, choices: List[Tuple[str, str, bool]]) -> str:
        """Ask the user to pick one tag from (tag, description, is_default) choices."""
        pass

    @abstractmethod
    def display_message(self, message: str) -> None:
        """Display a message to the user.

        Args:
            message: The message to display
        """
        pass

    # installer-flow prompts, built on the primitives above

    def choose_source_mode(self) -> SourceMode:
        reply = self.choose_one(
            "Choose source",
            [
                (SourceMode.URL.value, "Download from URL", True),
                (SourceMode.LOCAL.value, "Use existing local file path", False),
            ],
        )
        try:
            return SourceMode(reply)
        except ValueError:
            return SourceMode.URL

    def ask_url(self) -> str:
        return self.ask_string("Paste direct download URL (http(s):// or ftp)")

    def ask_local_path(self) -> str:
        return self.ask_string("Enter absolute local file path")

    def ask_tool_name(self, default: str) -> str:
        return self.ask_string(
            "Suggested tool name (used for folder/service)", default=default
        )

    def ask_checksum(self) -> Optional[str]:
        if self.ask_yes_no(
            "Do you have a SHA256 checksum to verify the download?", default=False
        ):
            return self.ask_string("Paste SHA256 checksum (hex)") or None
        return None

    def choose_install_base(self, bin_dir: str) -> str:
        reply = self.choose_one(
            "Choose installation location",
            [
                (InstallBaseChoice.BIN_DIR.value, f"{bin_dir}  (single binary)", True),
                (InstallBaseChoice.OPT.value, f"{DEFAULT_OPT_DIR}/<toolname> (multi-file installs)", False),
                (InstallBaseChoice.CUSTOM.value, "Custom path (absolute)", False),
            ],
        )
        if reply == InstallBaseChoice.OPT.value:
            return DEFAULT_OPT_DIR
        elif reply == InstallBaseChoice.CUSTOM.value:
            return self.ask_string("Enter absolute custom path")
        else:
            return bin_dir

    def ask_run_now(self, executable: str) -> bool:
        return self.ask_yes_no(
            f"Run the installed executable now ({executable})?", default=False
        )

    def ask_create_service(self) -> bool:
        return self.ask_yes_no(
            "Create (optional) systemd service to auto-start this tool on boot?",
            default=False,
        )

    def ask_service_name(self, default: str) -> str:
        return self.ask_string("Service name (no spaces)", default=default)

    def ask_service_exec_path(self) -> str:
        return self.ask_string("Enter full path to executable for service (absolute)")
