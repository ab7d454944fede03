"""
Identifier image storage.

Images live in Django's default file storage under ``cards/``. Removal
is best-effort: it runs after the surrounding transaction commits and a
storage failure is only logged.
"""

import logging
import os
import uuid

from django.core.files.storage import default_storage
from django.db import transaction

logger = logging.getLogger(__name__)

IMAGE_DIRECTORY = 'cards'


def save_image(image) -> str:
    """Store an uploaded image and return its storage-relative path."""
    extension = os.path.splitext(image.name or '')[1].lower()
    return default_storage.save(f"{IMAGE_DIRECTORY}/{uuid.uuid4().hex}{extension}", image)


def delete_image(path: str) -> None:
    """Remove a stored image now, logging instead of raising on failure."""
    if not path:
        return

    try:
        default_storage.delete(path)
    except OSError:
        logger.warning("Could not delete card image %s", path, exc_info=True)


def delete_images_on_commit(paths) -> None:
    """Schedule removal of stored images once the transaction commits."""
    paths = [path for path in paths if path]
    if not paths:
        return

    def cleanup():
        for path in paths:
            delete_image(path)

    transaction.on_commit(cleanup)
