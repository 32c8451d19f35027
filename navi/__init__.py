"""Núcleo de Restructuring Navi: catálogos, motor de diagnóstico y notificaciones."""

__version__ = "1.0.0"
