"""Utilidades de entrada/salida."""

import json
from pathlib import Path
from typing import Any, Union


def ensure_dir(path: Union[str, Path]) -> Path:
    """
    Asegura que un directorio existe, creándolo si es necesario.

    Args:
        path: Ruta del directorio

    Returns:
        Path object del directorio
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_json(path: Union[str, Path]) -> Any:
    """
    Carga un documento JSON en UTF-8.

    Args:
        path: Ruta del archivo

    Returns:
        Contenido deserializado
    """
    path = Path(path)

    if path.suffix != ".json":
        raise ValueError(f"Formato no soportado: {path.suffix}")

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_json(data: Any, path: Union[str, Path]) -> Path:
    """
    Guarda datos como JSON legible (sin escapar caracteres no ASCII).

    Args:
        data: Datos serializables
        path: Ruta de destino

    Returns:
        Path del archivo guardado
    """
    path = Path(path)
    ensure_dir(path.parent)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    return path
