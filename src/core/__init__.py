"""Core: dominio, configuración y servicios. No depende de la CLI."""
