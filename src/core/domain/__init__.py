"""Modelos y tipos del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2), enums y errores.
- El dominio no conoce httpx ni la CLI: solo conceptos de la API remota.
"""
