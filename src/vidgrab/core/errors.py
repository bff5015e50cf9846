"""Exceptions raised by the download pipeline."""


class VidGrabError(Exception):
    """Base class for every error the pipeline reports to the user."""


class VideoLinkMissingError(VidGrabError, ValueError):
    """No page URL was given on the command line."""

    def __init__(self, message: str = "video link must be provided"):
        super().__init__(message)


class VideoIdError(VidGrabError, ValueError):
    """The page URL does not have the expected watch-page shape."""

    def __init__(self, message: str = "couldn't get video id"):
        super().__init__(message)


class FetchError(VidGrabError, RuntimeError):
    """The metadata request failed at the transport or HTTP level."""


class MetadataError(VidGrabError, ValueError):
    """The metadata payload could not be parsed."""


class FormatNotFoundError(VidGrabError, LookupError):
    """No streaming format matched the requested quality and codec."""

    def __init__(self, message: str = "video download url not found"):
        super().__init__(message)


class TitleNotFoundError(VidGrabError, LookupError):
    """The metadata carries no usable title."""

    def __init__(self, message: str = "video title not found"):
        super().__init__(message)


class DownloadError(VidGrabError, RuntimeError):
    """The media could not be saved to disk."""
