"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

Sous-packages :
- api/ : Client TMDB et stockages de cache (Redis, disque, memoire)
- cli/ : Interface ligne de commande (Typer)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
