"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El cliente Notion depende del contrato de transporte, no de httpx.
"""
