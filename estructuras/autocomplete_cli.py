"""Interactive menu for storing words and getting autocompletion suggestions."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from estructuras.word_tree import WordTree

_MENU = (
    "\nOpciones:\n"
    "1. Ingresar palabra\n"
    "2. Buscar sugerencias\n"
    "3. Mostrar árbol\n"
    "4. Eliminar palabra\n"
    "5. Salir\n"
    "Selecciona una opción: "
)


def _read_line(stream: TextIO) -> str | None:
    line = stream.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def run(input_stream: TextIO, output_stream: TextIO) -> WordTree:
    """Drive the menu until the user leaves or input ends; return the tree."""
    tree = WordTree()
    write = output_stream.write
    write("=== Sistema de Autocompletado EDD ===\n")
    while True:
        write(_MENU)
        option = _read_line(input_stream)
        if option is None:
            break
        if option == "1":
            write("Ingrese una palabra: ")
            word = _read_line(input_stream)
            if word is None:
                break
            tree.insert(word)
            write("Palabra guardada.\n")
        elif option == "2":
            write("Ingrese el prefijo a buscar: ")
            prefix = _read_line(input_stream)
            if prefix is None:
                break
            write(tree.describe_suggestions(prefix))
        elif option == "3":
            write("\nÁrbol binario de palabras:\n")
            write(tree.render())
            write("\n")
        elif option == "4":
            write("Ingrese la palabra a eliminar: ")
            word = _read_line(input_stream)
            if word is None:
                break
            tree.remove(word)
            write("Proceso de eliminación completado.\n")
        elif option == "5":
            write("Saliendo del programa.\n")
            break
        else:
            write("Opción no válida. Intente de nuevo.\n")
    return tree


def main(argv: list[str] | None = None) -> int:
    """Run the autocompletion menu on standard input and output."""
    argparse.ArgumentParser(description="Word autocompletion menu.").parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())