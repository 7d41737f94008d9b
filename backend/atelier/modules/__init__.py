"""Feature modules live here. Each module may define:

- models.py     (SQLAlchemy models using atelier.core.database.Base)
- schemas.py    (Pydantic wire models, camelCase on the wire)
- repository.py (a ResourceDescriptor and the repository bound to it)
- service.py    (the ResourceService for the module)
- router.py     (FastAPI APIRouter exported as `router`)

Routers are auto-discovered and included; models are imported before the
schema is created.
"""
