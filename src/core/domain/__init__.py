"""Modelos y operaciones del dominio.

Por qué:
- Aquí viven los registros de parámetros/respuestas (Pydantic v2) y la tabla
  de operaciones.
- El dominio no conoce HTTP, CLI, ni MCP: solo la forma de los datos.
"""
