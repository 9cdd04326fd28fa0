"""
Primitives de lots concurrents.

Deux disciplines distinctes, a ne pas confondre :
- gather_all : tout-ou-rien. Le premier echec fournisseur annule les taches
  soeurs et fait echouer le lot entier (AggregationFailure).
- gather_settled : au mieux. Chaque membre en echec est ecarte, les autres
  resultats sont retournes.
"""

import asyncio
from typing import Any, Awaitable, TypeVar

from loguru import logger

from src.core.errors import AggregationFailure, ProviderError

T = TypeVar("T")


async def _cancel_pending(tasks: list[asyncio.Future]) -> None:
    pending = [task for task in tasks if not task.done()]
    for task in pending:
        task.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)


async def gather_all(*aws: Awaitable[Any], operation: str) -> list[Any]:
    """
    Execute les awaitables en parallele, tout-ou-rien.

    Args:
        *aws: Requetes independantes du lot
        operation: Nom du lot, repris dans l'erreur et les logs

    Returns:
        Resultats dans l'ordre des awaitables

    Raises:
        AggregationFailure: Si un membre leve ProviderError (chainee a la cause)
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except ProviderError as e:
        await _cancel_pending(tasks)
        logger.bind(status_code=e.status_code, body=e.body).error(
            f"Lot {operation} en echec: {e}"
        )
        raise AggregationFailure(operation, e) from e
    except BaseException:
        await _cancel_pending(tasks)
        raise


async def gather_settled(*aws: Awaitable[T]) -> list[T]:
    """
    Execute les awaitables en parallele, au mieux.

    Les membres qui levent une exception sont ecartes (log debug) ; l'ordre
    des resultats restants suit l'ordre des awaitables.

    Returns:
        Resultats des membres reussis uniquement
    """
    results = await asyncio.gather(*aws, return_exceptions=True)

    settled: list[T] = []
    for result in results:
        if isinstance(result, asyncio.CancelledError):
            raise result
        if isinstance(result, Exception):
            logger.debug(f"Membre de lot ecarte: {result}")
            continue
        settled.append(result)
    return settled
