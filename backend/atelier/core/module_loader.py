from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Iterable, List

from fastapi import APIRouter


logger = logging.getLogger(__name__)

MODULES_PACKAGE = "atelier.modules"


def iter_submodules(package: str) -> Iterable[str]:
    pkg = importlib.import_module(package)
    for m in pkgutil.iter_modules(pkg.__path__):
        if m.ispkg:
            yield f"{package}.{m.name}"


def _import_optional(module_pkg: str, name: str):
    try:
        return importlib.import_module(f"{module_pkg}.{name}")
    except ModuleNotFoundError as exc:
        # Only a missing optional submodule is tolerated; broken imports inside it propagate.
        if exc.name != f"{module_pkg}.{name}":
            raise
        return None


def collect_routers() -> List[APIRouter]:
    """Import every feature module's models and return their routers.

    Models are imported first so ``Base.metadata`` is complete before the
    schema is created.
    """
    routers: List[APIRouter] = []
    for mod in iter_submodules(MODULES_PACKAGE):
        _import_optional(mod, "models")
        router_mod = _import_optional(mod, "router")
        router = getattr(router_mod, "router", None)
        if router is not None:
            logger.debug("Registering router %s from %s", router.prefix, mod)
            routers.append(router)
    return routers
