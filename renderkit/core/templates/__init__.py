# -*- coding: utf-8 -*-
"""
core.templates

Template service and lookup helpers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .lookup import TemplateLookup
from .service import TemplateService, get_template_service, set_template_service

__all__ = [
    "TemplateLookup",
    "TemplateService",
    "get_template_service",
    "set_template_service",
]


# The End
