"""
Soft client identity: a hash of the client address, kept in a long-lived cookie.

Not a security boundary. Clients behind one address share an identity.
"""
import logging

from fastapi import Request, Response

from pistebin.client_ip import get_client_ip
from pistebin.config import Settings
from pistebin.utils import hash_address

logger = logging.getLogger(__name__)


def resolve_identity(request: Request, response: Response, settings: Settings) -> str:
    """
    Return the client's identity value, issuing the cookie if absent.

    Args:
        request: Incoming request, checked for an existing identity cookie
        response: Response that receives the cookie when one is issued
        settings: Cookie name and lifetime

    Returns:
        The existing cookie value, or the freshly issued one
    """
    existing = request.cookies.get(settings.COOKIE_NAME)
    if existing:
        return existing

    identity = hash_address(get_client_ip(request))
    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=identity,
        max_age=settings.COOKIE_MAX_AGE,
        httponly=True,
    )
    logger.info("Issued new identity cookie")
    return identity
