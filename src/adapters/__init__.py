"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- api/ : Clients API externes (TMDB, OpenSubtitles)
- storage/ : Stockage local de la liste "My List" (diskcache)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
