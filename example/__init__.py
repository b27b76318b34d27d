# -*- coding: utf-8 -*-
"""
example

Demonstration project showing a dashboard with one CRUD controller.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""


# The End
