#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import hashlib
import os
import re

from collections.abc import Iterable


###################################################################################################
# flatten a collection, but don't split strings
def flatten(coll):
    for i in coll:
        if isinstance(i, Iterable) and not isinstance(i, str):
            for subc in flatten(i):
                yield subc
        else:
            yield i


###################################################################################################
# if the object is an iterable, return it, otherwise return a tuple with it as a single element.
# useful if you want to user either a scalar or an array in a loop, etc.
def get_iterable(x):
    if isinstance(x, Iterable) and not isinstance(x, str):
        return x
    else:
        return (x,)


###################################################################################################
# convenient boolean argument parsing
def str2bool(v):
    if isinstance(v, bool):
        return v
    elif isinstance(v, str):
        if v.lower() in ("yes", "true", "t", "y", "1"):
            return True
        elif v.lower() in ("no", "false", "f", "n", "0", ""):
            return False
        else:
            raise ValueError("Boolean value expected")
    elif not v:
        return False
    else:
        raise ValueError("Boolean value expected")


###################################################################################################
# replace anything that isn't safe in a file or service name with an underscore
TOOL_NAME_UNSAFE_RE = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_name(name):
    return TOOL_NAME_UNSAFE_RE.sub("_", name or "")


###################################################################################################
# sha256 hex digest of a file's contents, read in chunks
def sha256sum(filename):
    h = hashlib.sha256()
    b = bytearray(64 * 1024)
    mv = memoryview(b)
    with open(filename, "rb", buffering=0) as f:
        for n in iter(lambda: f.readinto(mv), 0):
            h.update(mv[:n])
    return h.hexdigest()


###################################################################################################
# open a file and close it, updating its access time
def touch(filename):
    open(filename, "a").close()
    os.utime(filename, None)


###################################################################################################
# determine if a program/script exists and is executable in the system path
def which(cmd):
    return any(
        os.access(os.path.join(path, cmd), os.X_OK) for path in os.environ.get("PATH", "").split(os.pathsep) if path
    )

