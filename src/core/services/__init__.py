"""Color API business logic services."""

from .color_repository import ColorRepository

__all__ = ["ColorRepository"]
