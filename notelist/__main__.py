# -*- coding: utf-8 -*-
"""
__main__

Allow ``python -m notelist``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .cli import cli

if __name__ == "__main__":
    cli()

# The End
