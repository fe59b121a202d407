# -*- coding: utf-8 -*-
"""
__init__

Core components for out-of-band controller rendering.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .controller import Controller
from .environment import EnvironmentBuilder
from .exceptions import MissingControllerError, MissingHostError, RenderKitError
from .options import RenderOptions
from .renderer import Renderer, renderer_registry

__all__ = [
    "Controller",
    "EnvironmentBuilder",
    "MissingControllerError",
    "MissingHostError",
    "RenderKitError",
    "RenderOptions",
    "Renderer",
    "renderer_registry",
]

# The End
