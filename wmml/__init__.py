"""Main module for WMML API.

The launch pipeline lives in `wmml.standard`: a version manifest is read from the game's
main directory, its libraries are resolved into a class path, its game arguments are
composed and everything is assembled into a `LaunchPlan` that can be run.
"""

LAUNCHER_NAME = "WMML"
LAUNCHER_VERSION = "0.1.26"
LAUNCHER_AUTHORS = ["WMProject1217", "Github contributors"]
LAUNCHER_COPYRIGHT = "WMML  Copyright (C) 2024  WMProject1217"
