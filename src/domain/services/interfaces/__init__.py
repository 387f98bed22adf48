"""Interfaces de servicios implementados en infraestructura."""
