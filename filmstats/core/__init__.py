"""
Couche domaine (core).

Contient l'entité Film et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dépendance vers l'infrastructure (httpx, typer, loguru).

Sous-packages :
- entities/ : Film et FilmCatalog
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
