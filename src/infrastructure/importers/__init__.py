"""Lectura de archivos JSON del catálogo."""
