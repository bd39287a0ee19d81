"""
MovieCache - Recuperation du catalogue de films avec cache-aside.

Ce package recupere la liste des films populaires et leurs documents de
detail depuis l'API TMDB, en consultant un cache avant chaque appel reseau.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (ports)
- services/ : Couche application (extraction de champs, cache-aside)
- adapters/ : Couche infrastructure (CLI, client API, stockages de cache)
"""
