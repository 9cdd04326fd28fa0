"""Interface ligne de commande LimeTV (Typer + Rich)."""
