"""
Couche domaine (core).

Contient les ports (interfaces abstraites) vers les collaborateurs externes.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks).
"""
