"""
app/schemas/response.py

Purpose: JSON envelope for errors on the plain HTTP routes
"""

from pydantic import BaseModel
from typing import Optional, Any

class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    error: str
    code: str
    details: Optional[Any] = None
