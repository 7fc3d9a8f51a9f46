from estructuras.word_tree import WordTree


def _tree(*words):
    tree = WordTree()
    for word in words:
        tree.insert(word)
    return tree


def _all(tree):
    return sorted(tree.suggestions(""))


def test_empty_tree_has_no_suggestions():
    tree = WordTree()
    assert tree.suggestions("") == []
    assert tree.render() == ""


def test_insert_counts_repeats():
    tree = _tree("casa", "casa", "perro")
    assert _all(tree) == [("casa", 2), ("perro", 1)]


def test_suggestions_filter_by_prefix_and_sort_by_frequency():
    tree = _tree("cama", "casa", "casa", "cosa", "casa", "cama", "perro")
    assert tree.suggestions("ca") == [("casa", 3), ("cama", 2)]
    assert tree.suggestions("x") == []


def test_suggestions_frequencies_non_increasing():
    tree = _tree("b", "a", "c", "a", "c", "c", "d")
    counts = [count for _, count in tree.suggestions("")]
    assert counts == sorted(counts, reverse=True)


def test_describe_suggestions_lists_words():
    tree = _tree("hola", "hola", "hoja")
    text = tree.describe_suggestions("ho")
    assert text.startswith('Sugerencias para "ho":\n')
    assert "- hola (usada 2 veces)\n" in text
    assert "- hoja (usada 1 veces)\n" in text


def test_describe_suggestions_when_nothing_matches():
    tree = _tree("hola")
    assert tree.describe_suggestions("zz") == 'No hay sugerencias para el prefijo "zz"\n'


def test_remove_decrements_frequency():
    tree = _tree("sol", "sol")
    tree.remove("sol")
    assert _all(tree) == [("sol", 1)]
    tree.remove("sol")
    assert _all(tree) == []


def test_remove_missing_word_is_noop():
    tree = _tree("m", "a", "z")
    tree.remove("q")
    assert _all(tree) == [("a", 1), ("m", 1), ("z", 1)]


def test_remove_node_with_one_child():
    tree = _tree("m", "f", "a")
    tree.remove("f")
    assert _all(tree) == [("a", 1), ("m", 1)]


def test_render_layout():
    tree = _tree("m", "f", "t")
    assert tree.render() == "\n     t(1)\nm(1)\n     f(1)"


def test_render_root_uses_given_space():
    tree = _tree("m")
    assert tree.render(space=3) == "\n   m(1)"