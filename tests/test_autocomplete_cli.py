import io

from estructuras.autocomplete_cli import run


def _run(text):
    out = io.StringIO()
    tree = run(io.StringIO(text), out)
    return tree, out.getvalue()


def test_insert_and_suggest():
    tree, output = _run("1\nhola\n1\nhola\n1\nhoja\n2\nho\n5\n")
    assert output.startswith("=== Sistema de Autocompletado EDD ===\n")
    assert output.count("Palabra guardada.\n") == 3
    assert "- hola (usada 2 veces)\n" in output
    assert output.endswith("Saliendo del programa.\n")
    assert sorted(tree.suggestions("")) == [("hoja", 1), ("hola", 2)]


def test_no_suggestions_message():
    _, output = _run("2\nabc\n5\n")
    assert 'No hay sugerencias para el prefijo "abc"\n' in output


def test_show_tree():
    tree, output = _run("1\nm\n3\n5\n")
    assert "\nÁrbol binario de palabras:\n" + tree.render() + "\n" in output


def test_remove_word():
    tree, output = _run("1\nluz\n4\nluz\n5\n")
    assert "Proceso de eliminación completado.\n" in output
    assert tree.suggestions("") == []


def test_invalid_option():
    _, output = _run("9\n5\n")
    assert "Opción no válida. Intente de nuevo.\n" in output


def test_end_of_input_stops_loop():
    tree, output = _run("1\nsol\n")
    assert tree.suggestions("") == [("sol", 1)]
    assert "Saliendo del programa." not in output