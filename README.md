# microkit

A small toolkit with the building blocks of a minimal command shell:

- `microkit.shell_parser`: classifies a command line as a pipeline (`|`),
  background commands (`&`), a redirection (`>>`, `>`, `<`), a `cd`, an
  `exit` or a plain command, and splits it into argument vectors.
- `microkit.shell_exec`: runs external commands singly, piped together,
  with a file redirection, or all at once in the background.
- `microls`: a tiny `ls` for the current directory (`microkit.ls`).
- Simple data structures: a binary tree (`microkit.btree`), a singly linked
  list (`microkit.linkedlist`) with sorting helpers (`microkit.listsort`),
  and a prime-sized hash table skeleton (`microkit.hashtable`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Parsing and running command lines

```python
from microkit.shell_parser import LineKind, parse_line
from microkit.shell_exec import run_command, run_pipeline, run_redirect, run_background

line = parse_line("ls -l | grep py | wc -l")
assert line.kind is LineKind.PIPE
run_pipeline(line.commands)          # list of exit statuses

line = parse_line("echo hello > out.txt")
run_redirect(line.argv, line.path, line.mode)

run_command(["echo", "hi"])          # exit status
run_background([["sleep", "1"], ["echo", "done"]])
```

Operators are checked in the order `|`, `&`, `>>`, `>`, `<`; each line uses
one kind. A redirection needs exactly one command and one file, otherwise
`parse_line` raises `ParseError`. An empty line also raises `ParseError`.
A line with no operator is `LineKind.CD` when its first word contains "cd",
`LineKind.EXIT` when it contains "exit", and `LineKind.COMMAND` otherwise.

`run_pipeline` accepts at most 10 commands (`MAX_PIPELINE`). `>` creates the
file if it is missing but does not truncate it; `>>` requires the file to
exist. A command that cannot be started, or a file that cannot be opened,
raises `ExecutionError`.

## What is not included

There is no interactive shell program: no prompt loop reading lines, no
`cd`/`exit` handling and no Ctrl-C/Ctrl-\ handling. The parser and the
runners above are the pieces such a loop would call.

## The ls command

```
microls          # visible entries of the current directory
microls -a       # include hidden entries, with . and ..
microls -l       # each entry followed by a line break
microls -la      # both
microls 'mic*'   # entries starting with "mic"
microls '*.py'   # entries containing ".py"
```

Entries are sorted and printed separated by spaces. An unrecognised flag
letter, or a non-flag argument without `*`, is reported on standard error
and the command exits with status 1.

## Data structures

```python
from microkit import btree
from microkit.linkedlist import LinkedList
from microkit.listsort import sort_list
from microkit.hashtable import create_hashtable

root = None
for value in [5, 2, 9, 1, 7]:
    root = btree.insert(root, value)
print(btree.level_count(root), btree.node_count(root))
btree.print_tree(root)

items = LinkedList([200, 3, 0, 6, -5])
sort_list(items)
print(list(items))                   # [-5, 0, 3, 6, 200]

table = create_hashtable(10)         # size is 11, the next prime
print(table.size, table.load_factor())
```