#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the orgmark library.

This module defines specialized exception classes for the error conditions
that can occur while loading a document tree and transcoding it into a
target dialect.

Exception Hierarchy
-------------------
- OrgmarkError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class or unknown option)

  - TreeLoadError (serialized tree cannot be turned into nodes)

  - TranscodeError (fatal rendering failure, aborts the whole export)
    - UnsupportedNodeKindError (no handler for a node kind)

  - DependencyError (optional package missing)

"""

from typing import Any


class OrgmarkError(Exception):
    """Base exception class for all orgmark-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(OrgmarkError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when export options cannot be used.

    Raised when a caller passes something other than ``ExportOptions`` to the
    engine, or when configuration names an option that does not exist.

    Parameters
    ----------
    message : str
        Description of the problem
    parameter_value : any, optional
        The offending value
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parameter_value: Any = None, original_error: Exception | None = None):
        """Initialize the invalid options error."""
        super().__init__(
            message, parameter_name="options", parameter_value=parameter_value, original_error=original_error
        )


class TreeLoadError(OrgmarkError):
    """Exception raised when a serialized document tree is malformed.

    Parameters
    ----------
    message : str
        Description of the problem
    path : str, optional
        Location of the offending value inside the serialized tree
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, path: str | None = None, original_error: Exception | None = None):
        """Initialize the tree load error."""
        super().__init__(message, original_error)
        self.path = path


class TranscodeError(OrgmarkError):
    """Exception raised when a document cannot be transcoded.

    This is the single fatal error kind of the engine. It is raised for
    unsupported list, link or footnote variants, headline levels outside a
    profile's table and malformed link targets. It aborts the whole export;
    no partial document is returned.

    Parameters
    ----------
    message : str
        Description of the failure
    node_kind : str, optional
        Kind of the node that was being rendered
    original_error : Exception, optional
        The underlying exception, if any

    """

    def __init__(self, message: str, node_kind: str | None = None, original_error: Exception | None = None):
        """Initialize the transcode error."""
        super().__init__(message, original_error)
        self.node_kind = node_kind


FatalTranscodeError = TranscodeError


class UnsupportedNodeKindError(TranscodeError):
    """Exception raised when a profile has no handler for a node kind.

    Parameters
    ----------
    node_kind : str
        The unhandled kind
    profile_name : str
        Name of the active rendering profile

    """

    def __init__(self, node_kind: str, profile_name: str):
        """Initialize the unsupported node kind error."""
        super().__init__(f"Profile '{profile_name}' cannot render node kind '{node_kind}'", node_kind=node_kind)
        self.profile_name = profile_name


class DependencyError(OrgmarkError):
    """Exception raised when an optional dependency is not installed.

    Parameters
    ----------
    feature : str
        Name of the feature that needs the dependency
    missing_packages : list of (str, str)
        ``(package_name, version_spec)`` pairs that must be installed
    message : str, optional
        Custom error message; a pip hint is generated when omitted

    """

    def __init__(self, feature: str, missing_packages: list[tuple[str, str]], message: str | None = None):
        """Initialize the dependency error with package details."""
        if message is None:
            packages = " ".join(f"{name}{spec}" for name, spec in missing_packages)
            message = f"'{feature}' requires missing packages. Install with: pip install {packages}"
        super().__init__(message)
        self.feature = feature
        self.missing_packages = missing_packages
