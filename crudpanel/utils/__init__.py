# -*- coding: utf-8 -*-
"""
utils

Utility helpers for CrudPanel.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""


# The End
