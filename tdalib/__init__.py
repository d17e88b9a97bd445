"""Stack, queue, singly, circular and doubly linked list types, with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["comun", "pila", "cola", "lista", "lista_circular", "lista_doble", "menu"]