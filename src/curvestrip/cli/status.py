"""Process exit codes."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit status of the curvestrip command, one per failing stage."""

    OK = 0
    IO = 1
    USAGE = 2
    LOGGING = 3
    INPUT = 5
    CURVE = 6
    OUTPUT = 7
