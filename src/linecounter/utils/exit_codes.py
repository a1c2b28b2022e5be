"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success: every requested file was counted (read failures are reported
      but do not change the code)
  1   The root directory does not exist
  2   The named file does not exist, scaffold failure, or usage error
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    DIRECTORY_NOT_FOUND = 1
    FILE_NOT_FOUND = 2
    ERROR = 2
