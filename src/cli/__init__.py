"""Capa CLI (Typer + Rich): solo presentación, delega en `core.services`."""
