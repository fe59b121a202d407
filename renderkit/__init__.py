"""
__init__

Renderkit entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .core.configuration.conf import RenderKitSettings, configure, current_settings
from .core.controller import Controller
from .core.environment import EnvironmentBuilder
from .core.exceptions import MissingControllerError, MissingHostError, RenderKitError
from .core.options import RenderOptions
from .core.renderer import Renderer
from .meta import __version__

__all__ = [
    "Controller",
    "EnvironmentBuilder",
    "MissingControllerError",
    "MissingHostError",
    "RenderKitError",
    "RenderKitSettings",
    "RenderOptions",
    "Renderer",
    "__version__",
    "configure",
    "current_settings",
]

# The End
