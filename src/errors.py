"""Errors raised by plugins and the version specification model."""

from typing import Optional


class PluginError(Exception):
    """An error containing a return code for the plugin host.

    The optional ``cause`` is chained as ``__cause__`` so tracebacks keep
    the original failure.
    """

    def __init__(self, message: str = "", cause: Optional[BaseException] = None, return_code: int = 1):
        super().__init__(message)
        self.message = message
        self.return_code = return_code
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class VersionParseError(PluginError, ValueError):
    """Raised when a string cannot be parsed into a version specification."""

    def __init__(self, value: str, cause: Optional[BaseException] = None):
        super().__init__(f"Invalid version: {value}", cause=cause)
        self.value = value


class OperationError(PluginError):
    """Raised when an operation is not valid for the current variant."""

    def __init__(self, message: str = "invalid operation", cause: Optional[BaseException] = None):
        super().__init__(message, cause=cause)


class UnsupportedOSError(PluginError):
    """Raised by a plugin when the host operating system has no build of the tool.

    The ``Unsupported*`` errors are part of the public API for plugin authors;
    the version model itself never raises them.
    """

    def __init__(self, tool: str, os: str, cause: Optional[BaseException] = None):
        super().__init__(f"Unable to install {tool}, unsupported OS {os}.", cause=cause)
        self.tool = tool
        self.os = os


class UnsupportedArchError(PluginError):
    """Raised by a plugin when the host architecture has no build of the tool."""

    def __init__(self, tool: str, arch: str, cause: Optional[BaseException] = None):
        super().__init__(f"Unable to install {tool}, unsupported architecture {arch}.", cause=cause)
        self.tool = tool
        self.arch = arch


class UnsupportedCanaryError(PluginError):
    """Raised by a plugin whose tool publishes no canary or nightly builds."""

    def __init__(self, tool: str, cause: Optional[BaseException] = None):
        super().__init__(f"{tool} does not support canary/nightly versions.", cause=cause)
        self.tool = tool


class UnsupportedTargetError(PluginError):
    """Raised by a plugin when an architecture is unsupported on one operating system."""

    def __init__(self, tool: str, arch: str, os: str, cause: Optional[BaseException] = None):
        super().__init__(
            f"Unable to install {tool}, unsupported architecture {arch} for {os}.",
            cause=cause,
        )
        self.tool = tool
        self.arch = arch
        self.os = os
