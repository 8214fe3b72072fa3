"""Attachment classification and file-picker filters."""

from ..models import AttachmentKind

# Advisory only; the picker may still return any file.
DEFAULT_ACCEPT = "image/*,video/*,application/*"

ACCEPT_FILTERS: dict[AttachmentKind, str] = {
    AttachmentKind.IMAGE: "image/*",
    AttachmentKind.VIDEO: "video/*",
    AttachmentKind.DOCUMENT: ".pdf,.doc,.docx,.txt",
}


def classify_attachment(mime_type: str | None) -> AttachmentKind:
    """Classify a file by its MIME prefix. Anything unrecognised is a document."""
    mime = (mime_type or "").lower()
    if mime.startswith("image/"):
        return AttachmentKind.IMAGE
    if mime.startswith("video/"):
        return AttachmentKind.VIDEO
    return AttachmentKind.DOCUMENT
