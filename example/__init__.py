# -*- coding: utf-8 -*-
"""
example

Example project rendering controller pages with renderkit.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# The End
