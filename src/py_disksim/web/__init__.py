"""JSON web API for py-disksim.

This package provides a Flask application that exposes the simulator
over HTTP.  It is an **optional** extra — install with::

    pip install py-disksim[web]

The ``create_app`` factory in ``app.py`` serves two endpoints:

- ``GET /api/policies`` — available policies and their requirements.
- ``POST /api/simulate`` — run one policy and return its trace as JSON.
"""
