"""Adaptadores de I/O: clientes HTTP de proveedores y exportadores."""
