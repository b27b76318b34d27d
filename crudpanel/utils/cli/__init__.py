# -*- coding: utf-8 -*-
"""
cli

Command line helpers for CrudPanel.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .entrypoint import cli

__all__ = ["cli"]


# The End
