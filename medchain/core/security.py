"""
Core security utilities for caller identity.

Callers are identified by an address carried in the ``sub`` claim of a JWT
bearer token. Tokens are normally minted by the identity gateway that shares
``SECRET_KEY``; the ledger only verifies them.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import jwt, JWTError
import logging
import re

from ..config import settings

# Set up logging
logger = logging.getLogger(__name__)

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")

def is_valid_address(value: str) -> bool:
    """
    Check that a value looks like an account address.
    
    Args:
        value: Candidate address
        
    Returns:
        bool: True for 0x followed by 40 hex characters
    """
    return bool(value) and bool(ADDRESS_PATTERN.match(value))

def normalize_address(value: str) -> str:
    """
    Canonical form of an address used as a storage key.
    
    Args:
        value: Address in any letter case
        
    Returns:
        str: Lower-case address
        
    Raises:
        ValueError: If the value is not an address
    """
    if not is_valid_address(value):
        raise ValueError(f"Invalid address: {value!r}")
    return value.lower()

def create_access_token(address: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token for an address.
    
    Args:
        address: Caller address to place in the subject claim
        expires_delta: Token expiration time
        
    Returns:
        str: Encoded JWT token
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode = {"sub": normalize_address(address), "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)

def verify_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Verify and decode a JWT token.
    
    Args:
        token: JWT token string
        
    Returns:
        Dict containing token payload if valid, None if invalid
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        return payload
    except JWTError as e:
        logger.warning(f"Token verification failed: {e}")
        return None
