#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Terminal UI implementation for the installer."""

from typing import List, Optional, Tuple

from tool_installer.tool_common import (
    AskForString,
    ChooseOne,
    DialogInit,
    UserInputDefaultsBehavior,
    UserInterfaceMode,
    YesOrNo,
)
from tool_installer.installer.utils.logger_utils import InstallerLogger

from tool_installer.installer.ui.shared.installer_ui import InstallerUI


class TUIInstallerUI(InstallerUI):
    """Terminal UI implementation using the tool_common prompts."""

    def __init__(
        self,
        ui_mode: UserInterfaceMode = UserInterfaceMode.InteractionInput,
        non_interactive: bool = False,
    ):
        """Initialize the TUI interface.

        Args:
            ui_mode: InteractionInput for plain prompts, InteractionDialog for python-dialog widgets
            non_interactive: Accept every default without prompting
        """
        if (ui_mode & UserInterfaceMode.InteractionDialog) and not DialogInit():
            InstallerLogger.warning("dialog program not found, falling back to text prompts")
            ui_mode = UserInterfaceMode.InteractionInput
        super().__init__(ui_mode, non_interactive)

        self.default_behavior = UserInputDefaultsBehavior.DefaultsPrompt | UserInputDefaultsBehavior.DefaultsAccept
        if non_interactive:
            self.default_behavior |= UserInputDefaultsBehavior.DefaultsNonInteractive

    def ask_yes_no(self, message: str, default: bool = False) -> bool:
        return YesOrNo(
            message,
            default=default,
            defaultBehavior=self.default_behavior,
            uiMode=self.ui_mode,
        )

    def ask_string(self, prompt: str, default: Optional[str] = None) -> str:
        return AskForString(
            prompt,
            default=default,
            defaultBehavior=self.default_behavior,
            uiMode=self.ui_mode,
        )

    def choose_one(self, prompt: str, choices: List[Tuple[str, str, bool]]) -> str:
        return ChooseOne(
            prompt,
            choices=choices,
            defaultBehavior=self.default_behavior,
            uiMode=self.ui_mode,
        )

    def display_message(self, message: str) -> None:
        """Messages go through the shared logger so they also reach the log file."""
        InstallerLogger.info(message)
