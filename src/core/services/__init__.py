"""Servicios de aplicación (orquestación de lookups)."""
