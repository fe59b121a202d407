# -*- coding: utf-8 -*-
"""
cli

Command line utilities for renderkit.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .entrypoint import RenderKitCLI, cli

__all__ = ["RenderKitCLI", "cli"]

# The End
