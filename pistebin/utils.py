"""
Paste id generation, address hashing and blank-content checks.
"""
import hashlib
import secrets

# Characters JavaScript's String.prototype.trim removes
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def generate_paste_id() -> str:
    """Return 4 random bytes as 8 lowercase hex characters."""
    return secrets.token_hex(4)


def hash_address(address: str) -> str:
    """SHA-256 hex digest of a network address."""
    return hashlib.sha256(address.encode("utf-8")).hexdigest()


def is_blank(text: str) -> bool:
    """True if nothing is left after trimming JS whitespace from both ends."""
    return not text.strip(JS_WHITESPACE)
