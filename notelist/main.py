# -*- coding: utf-8 -*-
"""
main

ASGI entry point built from the environment configuration.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .application import create_app

app = create_app()

# The End
