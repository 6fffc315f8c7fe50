"""
Utilitaires partages pour les commandes CLI de yachk.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container et fermant le client catalogue
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger

from yachk.container import Container


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("yachk")
    try:
        yield
    finally:
        loguru_logger.enable("yachk")


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Le client HTTP du catalogue est ferme a la fin de la commande,
    meme en cas d'exception.

    Usage:
        @with_container()
        async def my_command(container, ...):
            checker = container.checker()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.catalog_client().close()
        return wrapper
    return decorator
