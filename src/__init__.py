"""
LimeTV - Agrégation de contenu et résolution de sous-titres.

Ce package construit les écrans d'accueil et de détail à partir de TMDB,
résout la liste "My List" et récupère des sous-titres classés depuis
OpenSubtitles.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, erreurs)
- services/ : Couche application (agrégation, filtrage, sous-titres)
- adapters/ : Couche infrastructure (CLI, clients API, stockage)
"""
