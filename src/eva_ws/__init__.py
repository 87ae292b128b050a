"""European Variation Archive web services gateway.

Key Responsibilities:
    - Expose the read-only REST surface over the variant/study datastore
    - Normalise request parameters and translate legacy identifiers

Collaborators:
    - Upstream: ASGI servers importing :func:`eva_ws.gateway.app.create_app`
    - Downstream: Storage adaptors registered per species

Side Effects:
    - None at import time
"""

__version__ = "0.1.0"
