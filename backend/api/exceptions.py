# backend/api/exceptions.py
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from .errors import DecryptionError, InvalidPolicy

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    """Traduit les erreurs du générateur/chiffrement en réponses DRF."""
    if isinstance(exc, InvalidPolicy):
        logger.info("Rejected password policy: %s", exc)
        return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, DecryptionError):
        logger.error("Decryption failed: %s", exc)
        return Response(
            {"detail": "Stored secret could not be decrypted."},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return drf_exception_handler(exc, context)
