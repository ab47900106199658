"""
app/validators package marker.
"""

from app.validators.file_validator import FileValidator

__all__ = ["FileValidator"]
