"""Resource value models and file helpers."""

from .files import read_value, write_value
from .models import ResourceValue

__all__ = ["ResourceValue", "read_value", "write_value"]
