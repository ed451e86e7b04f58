"""
FilmStats - Statistiques sur le catalogue de films du service Films.

Ce package recupere une seule fois le catalogue de films depuis l'API
distante, puis calcule des statistiques par realisateur.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entite Film, ports)
- services/ : Couche application (cache du catalogue, agregations)
- adapters/ : Couche infrastructure (client HTTP, CLI)
"""

__version__ = "0.1.0"
