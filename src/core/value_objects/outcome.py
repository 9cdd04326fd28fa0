"""
Types resultat explicites (succes / echec) et combinateur or_else.

Remplacent les chaines try/except implicites : l'ordre des replis et la
suppression des erreurs de moindre priorite deviennent des branches
explicites et testables.

Usage:
    outcome = await or_else(
        lambda: attempt(client.get_movie(item_id)),
        lambda: attempt(client.get_series(item_id)),
    )
    if outcome.ok:
        print(outcome.value)
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar, Union

from src.core.errors import ProviderError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Resultat reussi portant une valeur."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Retourne la valeur."""
        return self.value


@dataclass(frozen=True)
class Failure:
    """Resultat en echec portant l'erreur d'origine."""

    error: Exception

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        """Leve l'erreur d'origine."""
        raise self.error


Outcome = Union[Success[T], Failure]


async def attempt(awaitable: Awaitable[T]) -> "Outcome[T]":
    """
    Execute un appel fournisseur et capture ProviderError en Failure.

    Les autres exceptions ne sont pas capturees : ce sont des fautes
    internes, pas des echecs attendus du fournisseur.
    """
    try:
        return Success(await awaitable)
    except ProviderError as e:
        return Failure(e)


async def or_else(
    *alternatives: Callable[[], Awaitable["Outcome[T]"]],
) -> "Outcome[T]":
    """
    Essaie chaque alternative dans l'ordre et retourne le premier succes.

    Les alternatives sont des fabriques : une alternative n'est lancee que si
    toutes les precedentes ont echoue. Si toutes echouent, retourne le dernier
    Failure (les erreurs precedentes sont ecartees).

    Raises:
        ValueError: Si aucune alternative n'est fournie
    """
    if not alternatives:
        raise ValueError("or_else() requires at least one alternative")

    outcome: Outcome[T] = Failure(ValueError("no alternative tried"))
    for alternative in alternatives:
        outcome = await alternative()
        if outcome.ok:
            return outcome
    return outcome
