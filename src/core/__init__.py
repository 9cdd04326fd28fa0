"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur et
la taxonomie des erreurs. Cette couche n'a AUCUNE dépendance vers
l'infrastructure (adapters, frameworks, HTTP).

Sous-packages :
- entities/ : Entités métier (CatalogItem, Category, DetailBundle, SubtitleCandidate)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (Success, Failure)
"""
