"""Presenter class registry."""

from .base import BaseRegistry
from .presenters import PresenterRegistry, presenter_path, presenters

__all__ = ["BaseRegistry", "PresenterRegistry", "presenter_path", "presenters"]
