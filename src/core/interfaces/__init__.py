"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el orquestador depende de abstracciones y
  los tests pueden sustituir el transporte o el sink de logs.
"""
