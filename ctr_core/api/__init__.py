"""Public command API."""

from .abc import CtrAbstractCommand
from .decorators import ctrcommand

__all__ = ["CtrAbstractCommand", "ctrcommand"]
