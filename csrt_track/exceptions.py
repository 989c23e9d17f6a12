"""Custom exceptions for CSRT Track"""


class CsrtTrackError(Exception):
    """Base exception for CSRT Track"""
    pass


class VideoError(CsrtTrackError):
    """Raised when the video source cannot be opened or read"""
    pass


class TrackerError(CsrtTrackError):
    """Raised when a tracker engine cannot be created or initialized"""
    pass


class ConfigurationError(CsrtTrackError):
    """Raised when configuration is invalid"""
    pass
