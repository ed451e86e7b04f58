"""
Interface en ligne de commande de FilmStats (typer + rich).
"""
