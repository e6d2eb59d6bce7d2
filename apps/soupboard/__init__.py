# -*- coding: utf-8 -*-
"""SoupBoard (soup recipe catalog) service package.

- Backend: FastAPI (ASGI)
- Data: EhCookWhat_Soup_Recipe.csv (one row per soup)
- UI: server-rendered card grid + detail overlay
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
