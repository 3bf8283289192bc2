"""Admission checks applied to an upload before any processing."""

from audio_analysis.config import MAX_FILE_SIZE_BYTES
from audio_analysis.exceptions import FileTooLargeError, InvalidMediaTypeError

AUDIO_MEDIA_PREFIX = "audio/"


def validate_upload(
    media_type: str | None, size: int, max_size: int = MAX_FILE_SIZE_BYTES
) -> None:
    """
    Admits an upload only if it is declared as audio and fits the size limit.

    The media type is checked first, so a non-audio file is always reported
    as such regardless of its size.

    Args:
        media_type: Declared MIME type of the upload.
        size: Size of the upload in bytes.
        max_size: Largest accepted size in bytes (inclusive).

    Raises:
        InvalidMediaTypeError: If the media type does not start with "audio/".
        FileTooLargeError: If the size exceeds max_size.
    """
    if not media_type or not media_type.startswith(AUDIO_MEDIA_PREFIX):
        raise InvalidMediaTypeError(media_type)
    if size > max_size:
        raise FileTooLargeError(size, max_size)
