"""Interactive menu for the pending/completed task board."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from estructuras.tasks import NoTasksError, Task, TaskBoard

_MENU = (
    "--- Uso de Pilas y Colas ---\n"
    "--- Gestion de Tareas ---\n"
    "1. Agregar tarea\n"
    "2. Completar tarea\n"
    "3. Deshacer ultima tarea completada\n"
    "4. Mostrar tareas pendientes\n"
    "5. Mostrar tareas completadas\n"
    "6. Salir\n"
    "Seleccione una opcion: \n"
)


def _read_line(stream: TextIO) -> str | None:
    line = stream.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _listing(title: str, empty: str, tasks: list[Task]) -> str:
    if not tasks:
        return f"{empty}\n\n"
    return f"{title}\n" + "".join(
        f"- [{task.id}] {task.description}\n\n" for task in tasks
    )


def run(input_stream: TextIO, output_stream: TextIO) -> TaskBoard:
    """Drive the menu until the user leaves or input ends; return the board."""
    board = TaskBoard()
    write = output_stream.write
    while True:
        write(_MENU)
        line = _read_line(input_stream)
        if line is None:
            break
        try:
            option = int(line.strip())
        except ValueError:
            option = 0
        if option == 1:
            write("Ingrese la descripcion de la tarea: ")
            description = _read_line(input_stream)
            if description is None:
                break
            board.add(description)
            write("Tarea agregada.\n\n")
        elif option == 2:
            try:
                task = board.complete()
            except NoTasksError as error:
                write(f"{error}\n\n")
            else:
                write(f"Tarea completada: {task.description}\n\n")
        elif option == 3:
            try:
                task = board.undo()
            except NoTasksError as error:
                write(f"{error}\n\n")
            else:
                write(f"Se deshizo la ultima tarea completada: {task.description}\n\n")
        elif option == 4:
            write(_listing("Tareas Pendientes:", "No hay tareas pendientes.", board.pending()))
        elif option == 5:
            write(
                _listing("Tareas Completadas:", "No hay tareas completadas.", board.completed())
            )
        elif option == 6:
            write("Gracias por utilizar el programa\n")
            break
        else:
            write("Opcion no valida\n")
    return board


def main(argv: list[str] | None = None) -> int:
    """Run the task menu on standard input and output."""
    argparse.ArgumentParser(description="Task manager menu.").parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())