"""Interactive console menu for trying out the container types."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Any, Optional, TextIO

from .cola import Queue
from .comun import EmptyError, NotFoundError, Order
from .lista import LinkedList
from .lista_circular import CircularList
from .lista_doble import DoublyLinkedList
from .pila import Stack

RESET = "\x1b[0m"
ROJO = "\x1b[31m"
VERDE = "\x1b[32m"
AMAR = "\x1b[33m"
AZUL = "\x1b[34m"
MAG = "\x1b[35m"
CYAN = "\x1b[36m"
BOLD = "\x1b[1m"

_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_INTEGER = re.compile(r"[+-]?\d+")


def compare_int(a: int, b: int) -> int:
    """Three-way comparison of two integers."""
    return a - b


def format_int(value: Any) -> str:
    """Render an integer highlighted in yellow."""
    return f"{AMAR}{value}{RESET}"


class Menu:
    """A text menu reading integer choices from ``stdin`` and writing to ``stdout``."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pending: list[str] = []

    # -- input and output helpers -------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _clear(self) -> None:
        isatty = getattr(self._out, "isatty", None)
        if isatty is not None and isatty():
            self._write(_CLEAR_SCREEN)

    def _read_int(self) -> Optional[int]:
        """Read the next integer token; ``None`` discards the rest of a bad line.

        Raises ``EOFError`` when the input is exhausted.
        """
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise EOFError
            self._pending = line.split()
        token = self._pending.pop(0)
        match = _INTEGER.match(token)
        if match is None:
            self._pending.clear()
            return None
        rest = token[match.end():]
        if rest:
            self._pending.insert(0, rest)
        return int(match.group())

    def _read_option(self) -> int:
        option = self._read_int()
        return -1 if option is None else option

    def _read_value(self, prompt: str) -> int:
        while True:
            self._write(prompt)
            value = self._read_int()
            if value is not None:
                return value

    def _pause(self) -> None:
        self._write(f"{MAG}\nPresione Enter para continuar...{RESET}")
        self._pending.clear()
        self._in.readline()

    def _invalid(self) -> None:
        self._write(f"{ROJO}Opcion invalida.\n{RESET}")

    def _show(self, label: str, rendered: str) -> None:
        self._write(f"{VERDE}{label}[ {RESET}")
        self._write(rendered)
        self._write(f"{VERDE} ]\n{RESET}")

    # -- menus ---------------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user chooses to leave or input ends."""
        option = -1
        try:
            while option != 0:
                self._clear()
                self._write(f"{AZUL}=======================================")
                self._write("\n            MENU DE PRUEBAS          \n")
                self._write(f"=======================================\n{RESET}")
                self._write(f"\n{CYAN}1. PROBAR PILA{RESET}")
                self._write(f"\n{CYAN}2. PROBAR COLA{RESET}")
                self._write(f"\n{CYAN}3. PROBAR LISTA{RESET}")
                self._write(f"\n{CYAN}4. PROBAR LISTA CICULAR{RESET}")
                self._write(f"\n{CYAN}5. PROBAR LISTA DOBLE{RESET}")
                self._write(f"\n{ROJO}0. SALIR{RESET}")
                self._write("\n\nSeleccione una opcion: ")
                option = self._read_option()
                match option:
                    case 1:
                        self.stack_menu()
                    case 2:
                        self.queue_menu()
                    case 3:
                        self.list_menu()
                    case 4:
                        self.circular_menu()
                    case 5:
                        self.double_menu()
                    case 0:
                        self._write(f"{MAG}\nFinalizando programa...\n{RESET}")
                    case -1:
                        pass
                    case _:
                        self._invalid()
                        self._pause()
        except EOFError:
            return

    def stack_menu(self) -> None:
        """Exercise a stack of integers."""
        stack = Stack()
        while True:
            self._clear()
            self._write(f"{AZUL}\n--- MODULO PILA ---\n{RESET}")
            self._write(
                f"{CYAN}\n1. Apilar (int)\n2. Desapilar\n3. Ver Tope\n4. Vaciar Pila"
                f"\n{ROJO}0. Volver{RESET}\n\nOpcion: "
            )
            match self._read_option():
                case 1:
                    stack.push(self._read_value("Ingrese entero: "))
                    self._write(f"{VERDE}Ok.\n{RESET}")
                    self._pause()
                case 2:
                    try:
                        self._write(f"{VERDE}Sacado: {stack.pop()}\n{RESET}")
                    except EmptyError:
                        self._write(f"{AMAR}Pila vacia.\n{RESET}")
                    self._pause()
                case 3:
                    try:
                        self._write(f"{VERDE}Tope: {stack.peek()}\n{RESET}")
                    except EmptyError:
                        self._write(f"{AMAR}Pila vacia.\n{RESET}")
                    self._pause()
                case 4:
                    stack.clear()
                    self._write(f"{MAG}Pila destruida.\n{RESET}")
                    self._pause()
                case 0:
                    stack.clear()
                    return
                case _:
                    self._invalid()
                    self._pause()

    def queue_menu(self) -> None:
        """Exercise a queue of integers."""
        queue = Queue()
        while True:
            self._clear()
            self._write(f"{AZUL}\n--- MODULO COLA ---\n{RESET}")
            self._write(
                f"{CYAN}\n1. Poner en Cola\n2. Sacar de Cola\n3. Ver Primero\n4. Vaciar Cola"
                f"\n{ROJO}0. Volver{RESET}\n\nOpcion: "
            )
            match self._read_option():
                case 1:
                    queue.enqueue(self._read_value("Ingrese entero: "))
                    self._write(f"{VERDE}Ok.\n{RESET}")
                    self._pause()
                case 2:
                    try:
                        self._write(f"{VERDE}Sacado: {queue.dequeue()}\n{RESET}")
                    except EmptyError:
                        self._write(f"{AMAR}Cola vacia.\n{RESET}")
                    self._pause()
                case 3:
                    try:
                        self._write(f"{VERDE}Primero: {queue.peek()}\n{RESET}")
                    except EmptyError:
                        self._write(f"{AMAR}Cola vacia.\n{RESET}")
                    self._pause()
                case 4:
                    queue.clear()
                    self._write(f"{MAG}Cola vaciada.\n{RESET}")
                    self._pause()
                case 0:
                    queue.clear()
                    return
                case _:
                    self._invalid()
                    self._pause()

    def list_menu(self) -> None:
        """Exercise a singly linked list of integers."""
        items = LinkedList()
        while True:
            self._clear()
            self._write(f"{AZUL}\n--- MODULO LISTA ---\n{RESET}")
            self._write(
                f"{CYAN}\n1. Insertar Comienzo\n2. Insertar Final\n3. Insertar Ordenado"
                "\n4. Eliminar Primero\n5. Eliminar Ultimo\n6. Eliminar Sin Orden"
                "\n7. Ordenar Lista\n8. Mostrar Lista\n9. Vaciar Lista"
                f"\n{ROJO}0. Volver{RESET}\n\nOpcion: "
            )
            match self._read_option():
                case 1:
                    items.push_front(self._read_value("Dato: "))
                    self._write(f"{VERDE}Agregado.\n{RESET}")
                    self._pause()
                case 2:
                    items.push_back(self._read_value("Dato: "))
                    self._write(f"{VERDE}Agregado.\n{RESET}")
                    self._pause()
                case 3:
                    items.insert_sorted(self._read_value("Dato: "), False, compare_int, None)
                    self._write(f"{VERDE}Agregado.\n{RESET}")
                    self._pause()
                case 4:
                    try:
                        self._write(f"{VERDE}Eliminado: {items.pop_front()}\n{RESET}")
                    except EmptyError:
                        self._write(f"{AMAR}Vacia.\n{RESET}")
                    self._pause()
                case 5:
                    try:
                        self._write(f"{VERDE}Eliminado: {items.pop_back()}\n{RESET}")
                    except EmptyError:
                        self._write(f"{AMAR}Vacia.\n{RESET}")
                    self._pause()
                case 6:
                    items.remove_all(self._read_value("Valor a eliminar: "), compare_int)
                    self._write(f"{VERDE}Eliminado.\n{RESET}")
                    self._pause()
                case 7:
                    try:
                        items.sort(compare_int)
                        self._write(f"{VERDE}Ordenada.\n{RESET}")
                    except EmptyError:
                        pass
                    self._pause()
                case 8:
                    self._show("Lista: ", items.format(format_int))
                    self._pause()
                case 9:
                    items.clear()
                    self._write(f"{VERDE}Lista vaciada.\n{RESET}")
                    self._pause()
                case 0:
                    items.clear()
                    return
                case _:
                    self._invalid()

    def circular_menu(self) -> None:
        """Exercise a circular list of integers."""
        ring = CircularList()
        while True:
            self._clear()
            self._write(f"{AZUL}\n--- MODULO LISTA CIRCULAR ---\n{RESET}")
            self._write(
                f"{CYAN}\n1. Insertar Ordenado"
                "\n2. Insertar al Principio (Push Pila/Cola)"
                "\n3. Insertar al Final (Encolar)"
                "\n4. Eliminar Especifico"
                "\n5. Eliminar Primero (Pop Pila/Desacolar)"
                "\n6. Eliminar Ultimo\n7. Mostrar Lista\n8. Vaciar Lista"
                f"\n{ROJO}0. Volver{RESET}\n\nOpcion: "
            )
            match self._read_option():
                case 1:
                    ring.insert_sorted(self._read_value("Dato: "), compare_int)
                    self._write(f"{VERDE}Agregado.\n{RESET}")
                    self._pause()
                case 2:
                    ring.push_front(self._read_value("Dato: "))
                    self._write(f"{VERDE}Agregado.\n{RESET}")
                    self._pause()
                case 3:
                    ring.push_back(self._read_value("Dato: "))
                    self._write(f"{VERDE}Agregado.\n{RESET}")
                    self._pause()
                case 4:
                    value = self._read_value("Dato a eliminar: ")
                    try:
                        removed = ring.remove(value, compare_int)
                        self._write(f"{VERDE}Elemento {removed} eliminado.\n{RESET}")
                    except (EmptyError, NotFoundError):
                        self._write(f"{AMAR}No se encontro el dato.\n{RESET}")
                    self._pause()
                case 5:
                    try:
                        self._write(f"{VERDE}Eliminado primero: {ring.pop_front()}\n{RESET}")
                    except EmptyError:
                        self._write(f"{ROJO}Lista vacia.\n{RESET}")
                    self._pause()
                case 6:
                    try:
                        self._write(f"{VERDE}Eliminado ultimo: {ring.pop_back()}\n{RESET}")
                    except EmptyError:
                        self._write(f"{ROJO}Lista vacia.\n{RESET}")
                    self._pause()
                case 7:
                    self._show("Lista (ASCD): ", ring.format(format_int))
                    self._pause()
                case 8:
                    ring.clear()
                    self._write(f"{AMAR}Lista vaciada.\n{RESET}")
                    self._pause()
                case 0:
                    ring.clear()
                    return
                case _:
                    self._invalid()
                    self._pause()

    def double_menu(self) -> None:
        """Exercise a doubly linked list of integers."""
        items = DoublyLinkedList()
        while True:
            self._clear()
            self._write(f"{AZUL}\n--- MODULO LISTA ---\n{RESET}")
            self._write(
                f"{CYAN}\n1. Insertar Ordenado\n2. Insertar al Principio\n3. Insertar al Final"
                "\n4. Eliminar Especifico\n5. Eliminar Primero\n6. Eliminar Ultimo"
                "\n7. Mostrar Ascendente\n8. Mostrar Descendente\n9. Vaciar Lista"
                f"\n{ROJO}0. Volver{RESET}\n\nOpcion: "
            )
            match self._read_option():
                case 1:
                    items.insert_sorted(self._read_value("Dato: "), True, compare_int, None)
                    self._write(f"{VERDE}Agregado.\n{RESET}")
                    self._pause()
                case 2:
                    items.push_front(self._read_value("Dato: "))
                    self._write(f"{VERDE}Agregado al principio.\n{RESET}")
                    self._pause()
                case 3:
                    items.push_back(self._read_value("Dato: "))
                    self._write(f"{VERDE}Agregado al final.\n{RESET}")
                    self._pause()
                case 4:
                    value = self._read_value("Dato a eliminar: ")
                    try:
                        items.remove(value, compare_int)
                        self._write(f"{VERDE}Eliminado.\n{RESET}")
                    except (EmptyError, NotFoundError):
                        self._write(f"{AMAR}No se encontro el dato.\n{RESET}")
                    self._pause()
                case 5:
                    try:
                        self._write(f"{VERDE}Se saco el primero: {items.pop_front()}\n{RESET}")
                    except EmptyError:
                        self._write(f"{ROJO}Lista vacia.\n{RESET}")
                    self._pause()
                case 6:
                    try:
                        self._write(f"{VERDE}Se saco el ultimo: {items.pop_back()}\n{RESET}")
                    except EmptyError:
                        self._write(f"{ROJO}Lista vacia.\n{RESET}")
                    self._pause()
                case 7:
                    self._show("Lista (ASCD): ", items.format(Order.ASCENDING, format_int))
                    self._pause()
                case 8:
                    self._show("Lista (DSCD): ", items.format(Order.DESCENDING, format_int))
                    self._pause()
                case 9:
                    items.clear()
                    self._write(f"{AMAR}Lista vaciada.\n{RESET}")
                    self._pause()
                case 0:
                    items.clear()
                    return
                case _:
                    self._invalid()
                    self._pause()


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive menu on the standard streams."""
    parser = argparse.ArgumentParser(
        prog="tdalib", description="Interactive test menu for the container types."
    )
    parser.parse_args(argv)
    Menu(sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())