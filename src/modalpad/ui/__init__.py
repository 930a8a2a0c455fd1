"""Text UI layer for modalpad."""

from .app import ModalPadApp
from .controller import UIController, UISnapshot
from .render import Frame, render_frame

__all__ = ["Frame", "ModalPadApp", "UIController", "UISnapshot", "render_frame"]
