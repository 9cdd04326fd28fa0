"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Success / Failure : Resultat explicite d'un appel fournisseur
- attempt : Capture ProviderError en Failure
- or_else : Premier succes parmi des alternatives ordonnees
"""

from src.core.value_objects.outcome import (
    Failure,
    Outcome,
    Success,
    attempt,
    or_else,
)

__all__ = [
    "Failure",
    "Outcome",
    "Success",
    "attempt",
    "or_else",
]
