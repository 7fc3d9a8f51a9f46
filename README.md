# estructuras

A handful of classic data structures, with small programs built on them. It
is meant for studying how each structure behaves. The program messages are in
Spanish.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `estructuras-bst`

This command builds a binary search tree from 8, 3, 10 and 1, then 6. It
prints the tree's inorder, preorder and postorder traversals.

### `estructuras-pilas-colas [cola|pila]`

This command pushes 1, 2 and 3 onto a queue. It shows the front and back of
the queue, removes one element and shows the new front.

It also pushes 10, 20 and 30 onto a stack. It shows the top, pops once and
shows the top again.

With `cola` or `pila`, only that demonstration runs. With no argument, both
run.

### `estructuras-autocompletado`

This is an interactive word-autocompletion menu read from standard input:

1. store a word, or count one more use of a word already stored
2. list the stored words that start with a prefix, most used first
3. draw the tree sideways, with the right subtree above and the left below
4. remove one use of a word; the word is dropped when no uses remain
5. leave

The menu also ends when input ends.

### `estructuras-tareas`

This is an interactive task manager read from standard input:

1. add a task to the pending queue, numbered from 1
2. complete the oldest pending task, which moves it onto the completed stack
3. undo, which sends the most recently completed task to the back of the queue
4. list the pending tasks
5. list the completed tasks, most recent first
6. leave

The menu also ends when input ends.

## Library use

```python
from estructuras.bst import BinarySearchTree
from estructuras.word_tree import WordTree
from estructuras.tasks import TaskBoard, NoTasksError

tree = BinarySearchTree([8, 3, 10, 1, 6])
tree.insert(7)
list(tree.inorder())     # [1, 3, 6, 7, 8, 10]
list(tree.preorder())    # [8, 3, 1, 6, 7, 10]

words = WordTree()
for word in ("casa", "casa", "cama", "perro"):
    words.insert(word)
words.suggestions("ca")           # [("casa", 2), ("cama", 1)]
print(words.describe_suggestions("ca"))
print(words.render())
words.remove("casa")              # lowers the count of "casa" to 1

board = TaskBoard()
task = board.add("write report")  # Task(id=1, description="write report")
board.complete()                  # moves it to the completed stack
board.undo()                      # returns it to the pending queue
board.pending()                   # [Task(id=1, description="write report")]
```

`BinarySearchTree` places equal values in the right subtree. Removing a word
from a `WordTree` that does not hold it does nothing.

`TaskBoard.complete()` raises `NoTasksError` when nothing is pending.
`TaskBoard.undo()` raises it when nothing has been completed. `NoTasksError`
is a subclass of `LookupError`.

`estructuras.autocomplete_cli.run(input_stream, output_stream)` and
`estructuras.tasks_cli.run(input_stream, output_stream)` drive the two menus
over any text streams. They return the resulting `WordTree` or `TaskBoard`.

## What it does not do

Nothing is saved. The words and tasks entered in the interactive menus live
only as long as the program runs. The trees are not balanced.