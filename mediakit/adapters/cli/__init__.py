"""Adapter CLI : commandes typer et affichage Rich."""
