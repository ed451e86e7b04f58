"""
Couche infrastructure (adapters).

Implémentations concrètes des ports du domaine :
- api/ : Client HTTP du service Films (httpx)
- cli/ : Interface en ligne de commande (typer + rich)
"""
