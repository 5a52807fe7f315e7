#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import os
import platform

from enum import IntFlag, auto

import requests
from dialog import Dialog, ExecutableNotFound

from tool_installer.tool_constants import (
    DOWNLOAD_CHUNK_SIZE,
    DOWNLOAD_TIMEOUT_SEC,
    LOG_PREFIX,
    PLATFORM_WINDOWS,
)
from tool_installer.tool_utils import str2bool

# Reasonable dialog bounds; used to reduce awkward wrapping in python-dialog
_DIALOG_MIN_WIDTH = 50
_DIALOG_MAX_WIDTH = 140
_DIALOG_MIN_HEIGHT = 7
_DIALOG_MAX_HEIGHT = 30

MainDialog = None


def _dialog_size_for(text: str) -> tuple[int, int]:
    """Compute a suitable (height, width) for a dialog widget."""
    lines = str(text).splitlines() or [""]
    max_line = max((len(line) for line in lines), default=_DIALOG_MIN_WIDTH)
    width = max(_DIALOG_MIN_WIDTH, min(max_line + 4, _DIALOG_MAX_WIDTH))
    # base height for buttons + borders; add per text line beyond the first
    height = _DIALOG_MIN_HEIGHT + max(0, len(lines) - 1)
    height = max(_DIALOG_MIN_HEIGHT, min(height, _DIALOG_MAX_HEIGHT))
    return height, width


def DialogInit():
    """Create the shared python-dialog instance; returns False if the dialog program is missing."""
    global MainDialog
    if MainDialog is None:
        try:
            MainDialog = Dialog(dialog='dialog', autowidgetsize=True)
        except ExecutableNotFound:
            MainDialog = None
    return MainDialog is not None


class UserInputDefaultsBehavior(IntFlag):
    DefaultsPrompt = auto()
    DefaultsAccept = auto()
    DefaultsNonInteractive = auto()


class UserInterfaceMode(IntFlag):
    InteractionDialog = auto()
    InteractionInput = auto()


class DialogCanceledException(Exception):
    pass


###################################################################################################
def ClearScreen():
    try:
        os.system("clear" if platform.system() != PLATFORM_WINDOWS else "cls")
    except Exception:
        pass


###################################################################################################
# get interactive user response to Y/N question
def YesOrNo(
    question,
    default=None,
    defaultBehavior=UserInputDefaultsBehavior.DefaultsPrompt,
    uiMode=UserInterfaceMode.InteractionDialog | UserInterfaceMode.InteractionInput,
    clearScreen=False,
):
    if (default is not None) and (
        (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept)
        and (defaultBehavior & UserInputDefaultsBehavior.DefaultsNonInteractive)
    ):
        reply = ""

    elif (uiMode & UserInterfaceMode.InteractionDialog) and (MainDialog is not None):
        defaultYes = (default is not None) and str2bool(default)
        _h, _w = _dialog_size_for(str(question))
        code = MainDialog.yesno(
            str(question),
            defaultno=not defaultYes,
            height=_h,
            width=_w,
        )
        if code == Dialog.ESC:
            raise DialogCanceledException(question)
        reply = 'y' if (code == Dialog.OK) else 'n'

    elif uiMode & UserInterfaceMode.InteractionInput:
        if (default is not None) and defaultBehavior & UserInputDefaultsBehavior.DefaultsPrompt:
            questionStr = f"{LOG_PREFIX} {question} [{'Y/n' if str2bool(default) else 'y/N'}]: "
        else:
            questionStr = f"{LOG_PREFIX} {question} [y/n]: "

        while True:
            reply = str(input(questionStr)).lower().strip()
            if len(reply) > 0:
                try:
                    str2bool(reply)
                    break
                except ValueError:
                    pass
            elif (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept) and (default is not None):
                break

    else:
        raise RuntimeError("No user interfaces available")

    if (len(reply) == 0) and (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept):
        reply = "y" if (default is not None) and str2bool(default) else "n"

    if clearScreen is True:
        ClearScreen()

    return str2bool(reply)


###################################################################################################
# get interactive user response
def AskForString(
    question,
    default=None,
    defaultBehavior=UserInputDefaultsBehavior.DefaultsPrompt,
    uiMode=UserInterfaceMode.InteractionDialog | UserInterfaceMode.InteractionInput,
    clearScreen=False,
):
    if (default is not None) and (
        (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept)
        and (defaultBehavior & UserInputDefaultsBehavior.DefaultsNonInteractive)
    ):
        reply = default

    elif (uiMode & UserInterfaceMode.InteractionDialog) and (MainDialog is not None):
        _h, _w = _dialog_size_for(str(question))
        code, reply = MainDialog.inputbox(
            str(question),
            init=(
                default
                if (default is not None) and (defaultBehavior & UserInputDefaultsBehavior.DefaultsPrompt)
                else ""
            ),
            height=_h,
            width=_w,
        )
        if (code == Dialog.CANCEL) or (code == Dialog.ESC):
            raise DialogCanceledException(question)
        reply = reply.strip()
        if (len(reply) == 0) and (default is not None) and (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept):
            reply = default

    elif uiMode & UserInterfaceMode.InteractionInput:
        reply = str(
            input(
                f"{LOG_PREFIX} {question}{f' [{default}]' if (default is not None) and (defaultBehavior & UserInputDefaultsBehavior.DefaultsPrompt) else ''}: "
            )
        ).strip()
        if (len(reply) == 0) and (default is not None) and (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept):
            reply = default

    else:
        raise RuntimeError("No user interfaces available")

    if clearScreen is True:
        ClearScreen()

    return reply


###################################################################################################
# choose one of many
# choices - an iterable of (tag, item, status) tuples where status marks the default choice
def ChooseOne(
    prompt,
    choices=[],
    defaultBehavior=UserInputDefaultsBehavior.DefaultsPrompt,
    uiMode=UserInterfaceMode.InteractionDialog | UserInterfaceMode.InteractionInput,
    clearScreen=False,
):
    validChoices = [x for x in choices if len(x) == 3 and isinstance(x[0], str) and isinstance(x[2], bool)]
    defaulted = next(iter([x for x in validChoices if x[2] is True]), None)

    if (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept) and (
        defaultBehavior & UserInputDefaultsBehavior.DefaultsNonInteractive
    ):
        reply = defaulted[0] if defaulted is not None else ""

    elif (uiMode & UserInterfaceMode.InteractionDialog) and (MainDialog is not None):
        _h, _w = _dialog_size_for(str(prompt))
        code, reply = MainDialog.radiolist(
            str(prompt),
            choices=validChoices,
            height=max(_h, 12),
            width=_w,
        )
        if code == Dialog.CANCEL or code == Dialog.ESC:
            raise DialogCanceledException(prompt)

    elif uiMode & UserInterfaceMode.InteractionInput:
        print(f"{LOG_PREFIX} {prompt}:")
        for choice in validChoices:
            print(
                f"{LOG_PREFIX}   {choice[0]}) {choice[1]}"
            )
        # anything unrecognized falls back to the default choice
        inputRaw = input(
            f"{LOG_PREFIX} Enter choice [{'/'.join(x[0] for x in validChoices)}]{f' [{defaulted[0]}]' if (defaulted is not None) and (defaultBehavior & UserInputDefaultsBehavior.DefaultsPrompt) else ''}: "
        ).strip()
        matched = [x for x in validChoices if x[0] == inputRaw]
        if matched:
            reply = matched[0][0]
        else:
            reply = defaulted[0] if defaulted is not None else ""

    else:
        raise RuntimeError("No user interfaces available")

    if clearScreen is True:
        ClearScreen()

    return reply


###################################################################################################
# download to file
def DownloadToFile(url, local_filename, timeout=DOWNLOAD_TIMEOUT_SEC):
    """Stream url into local_filename; raises requests.RequestException on failure."""
    with requests.get(url, stream=True, allow_redirects=True, timeout=timeout) as r:
        r.raise_for_status()
        with open(local_filename, 'wb') as f:
            for chunk in r.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
    return os.path.isfile(local_filename) and (os.path.getsize(local_filename) > 0)
