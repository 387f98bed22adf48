"""Repositorios en memoria sobre la instantánea del catálogo."""
