"""Acceptance filters for uploaded files.

Only names and MIME types are inspected; file content is never read.
"""

import logging
from typing import Iterable, Optional

from purchasedesk.domain.entities import FileRef

logger = logging.getLogger(__name__)

XML_CONTENT_TYPES = ("text/xml", "application/xml")

SIGNED_FILE_CONTENT_TYPES = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)
SIGNED_FILE_EXTENSIONS = (".pdf", ".png", ".jpg", ".jpeg", ".doc", ".docx")


def is_bill_file(file: FileRef) -> bool:
    """Return True if the file looks like an XML bill."""
    return file.content_type in XML_CONTENT_TYPES or file.name.lower().endswith(".xml")


def accept_bill_files(files: Iterable[FileRef]) -> list[FileRef]:
    """Keep XML files, silently dropping everything else."""
    accepted = []
    for file in files:
        if is_bill_file(file):
            accepted.append(file)
        else:
            logger.debug("Dropping non-XML file %s from bill import", file.name)
    return accepted


def is_signed_document(file: FileRef) -> bool:
    """Return True for PDF, image and Word documents."""
    content_type = file.content_type or ""
    if content_type in SIGNED_FILE_CONTENT_TYPES or content_type.startswith("image/"):
        return True
    return file.name.lower().endswith(SIGNED_FILE_EXTENSIONS)


def select_signed_file(files: Iterable[FileRef]) -> Optional[FileRef]:
    """Pick the signed document out of a selection. The last accepted file wins."""
    selected = None
    for file in files:
        if is_signed_document(file):
            selected = file
    return selected
