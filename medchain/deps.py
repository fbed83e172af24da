"""
FastAPI dependencies for the ledger and caller identity.
"""
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from .core.ledger import Ledger
from .core.security import verify_token, normalize_address

# OAuth2 scheme for JWT token authentication
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token")

def get_ledger(request: Request) -> Ledger:
    """
    Ledger dependency - Returns the ledger owned by the application.
    
    Returns:
        Ledger: Application ledger
    """
    return request.app.state.ledger

def get_current_address(token: str = Depends(oauth2_scheme)) -> str:
    """
    Get the caller address from the JWT bearer token.
    
    Args:
        token: JWT token from Authorization header
        
    Returns:
        str: Normalized caller address
        
    Raises:
        HTTPException: If token is invalid or carries no address
    """
    payload = verify_token(token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    try:
        return normalize_address(payload.get("sub") or "")
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
            headers={"WWW-Authenticate": "Bearer"},
        )

def parse_address(value: str) -> str:
    """
    Normalize an address taken from a path or body.
    
    Raises:
        HTTPException: 422 if the value is not an address
    """
    try:
        return normalize_address(value)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
