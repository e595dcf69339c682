"""
Domain services layered over the storage interface.

Submodules import app.schemas, so nothing is re-exported here to keep
app.schemas -> app.services.pipeline free of import cycles.
"""
