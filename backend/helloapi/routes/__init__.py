# Routes package init
"""
HelloAPI - API Routes Package
==============================

Route Inventory:
    - greetings.py: GET  /                 (hello world)
                    GET  /user/{name}      (path parameter echo)
    - search.py:    GET  /search           (query parameter echo)
    - data.py:      POST /data             (JSON body echo)
    - health.py:    GET  /health           (liveness check)

Each module exposes a `router`; create_app() mounts them in ROUTERS order.
The route table is fixed once the app is built.
"""

from helloapi.routes import data, greetings, health, search

ROUTERS = (
    greetings.router,
    search.router,
    data.router,
    health.router,
)
