import os
import pkgutil
from importlib import import_module

from fastapi import APIRouter

from catalog.logging import logger

# Track registered modules to prevent duplicate logging
_registered_http_modules: set[str] = set()


def collect_subrouters() -> APIRouter:
    """
    Collects the routers of every module under ``api/http``.

    Each module exposes a ``router``; they are included in module name
    order into one router, which is returned.
    """
    main_router: APIRouter = APIRouter()

    package_dir = os.path.dirname(__file__)
    package_name = os.path.basename(package_dir)

    for _, module, _ in pkgutil.iter_modules([f"{package_dir}/api/http"]):
        api = import_module(f".{module}", package=f"{package_name}.api.http")
        main_router.include_router(api.router)

        if module not in _registered_http_modules:
            logger.info(f'Register "{module}" api')
            _registered_http_modules.add(module)

    return main_router
