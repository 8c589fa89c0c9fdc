# obsmap/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class ObsMapError(Exception):
    """
    Base exception class for errors within the obsmap library.
    """


class ConfigurationError(ObsMapError):
    """
    Raised when a notification hook set is incomplete, carries unknown hooks,
    or holds something that is not callable.
    """


class ExtensionError(ObsMapError):
    """
    Raised when an extension cannot be applied or would clobber an existing
    member of its host.
    """


class DisposedError(ObsMapError):
    """
    Raised when a mutating operation is attempted on a disposed container.
    """
