# krtools

A collection of small command-line text filters and a few library pieces: a
hashed symbol table, a buffered file layer over raw file descriptors and a
first-fit allocator over a simulated heap. The filters read standard input or
the files you name and write to standard output. No dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Text analysis

| Command | What it does |
| --- | --- |
| `krtools-keywords` | Counts C keywords on standard input, skipping comments, character literals and string literals. Prints `count keyword` lines in keyword-table order. |
| `krtools-vargroup [N]` | Collects the names that follow `char`, `double`, `float`, `int`, `long`, `short` or `void` (including comma-separated lists) and groups those sharing their first `N` characters (6 by default). Groups come in first-seen order, names within a group sorted, a blank line after each group. |
| `krtools-xref` | Prints each word, sorted, with the numbers of the lines it occurs on, leaving out linking words such as "and", "the" or "to". |
| `krtools-wordfreq` | Lists the words of the input with their counts, most frequent first. Only the first thousand distinct words in alphabetical order are counted. |
| `krtools-define` | Copies C source through, replacing names set with `#define NAME VALUE` by their value and honouring `#undef NAME`. `VALUE` is a single alphanumeric word; if it is itself defined, its definition is used. |

```
krtools-keywords < program.c
krtools-vargroup 5 < program.c
krtools-xref < notes.txt
krtools-wordfreq < notes.txt
krtools-define < program.c
```

The same work is available from Python:

```python
from krtools.keywords import count_keywords, format_counts
from krtools.xref import cross_reference, format_xref
from krtools.wordfreq import word_frequencies, format_frequencies
from krtools.vargroup import group_variables, format_groups
from krtools.define import expand_defines

with open("program.c") as f:
    print(format_counts(count_keywords(f.read())), end="")

cross_reference("one two\ntwo three\n")   # {'one': [1], 'three': [2], 'two': [1, 2]}
expand_defines("#define N 10\nx = N;\n")  # '#define N 10\nx = 10;\n'
```

`krtools.scanner.CharStream` and `krtools.scanner.iter_words` are the shared
word reader: a word is a run of letters, digits and underscores starting with a
letter or underscore; every other character comes back on its own, and blanks
are skipped. With `code=True` comments and quoted literals are skipped too.

## Filters and file tools

| Command | What it does |
| --- | --- |
| `krtools-visible -o` / `krtools-visible -x` | Shows bytes above 127 as octal or hexadecimal escapes, turns newlines into spaces and breaks the line at the next blank once it reaches 70 columns. |
| `krtools-calc` | A reverse Polish calculator with `+ - * / %`. Prints any error messages, then `result: VALUE`. |
| `krtools-compare FILE1 FILE2` | Prints the first pair of lines where two files differ, each as `FILE [LINE]: text`. Stops silently when either file ends. |
| `krtools-find [-xn]... PATTERN [FILE]...` | Prints lines containing `PATTERN`; `-x` prints the lines that do not, `-n` adds line numbers. With files, each file's name is printed before its lines; with none, standard input is searched. At least two arguments are required. |
| `krtools-paginate FILE...` | Prints files with numbered lines and a `[FILE]: page N` heading every ten lines. |
| `krtools-cat [FILE]...` | Copies files, or standard input, to standard output. |
| `krtools-fsize [PATH]...` | Lists paths in the style of `ls -l` (mode, links, user, group, size in B/K/M/G, access time, name), walking into directories; a directory's entries are listed before the directory. Defaults to `.`. |
| `krtools-stdio SOURCE [DEST [OFFSET]]` | Copies `SOURCE` from byte `OFFSET` on to `DEST`, or to standard output, through the buffered file layer. |

```
echo "2 3 4 2 - + +" | krtools-calc
krtools-find -n "Some people" first.txt second.txt
krtools-compare first.txt second.txt
krtools-visible -x < data.bin
```

## Small demonstrations

| Command | What it does |
| --- | --- |
| `krtools-minprintf` | Prints one line using every conversion `minprintf` supports. |
| `krtools-minscanf` | Reads a decimal, an integer, an octal, an unsigned, a hexadecimal number, a character, a word and a float from standard input and prints them back. |
| `krtools-symtab` | Installs several names that share a hash bucket, looks one up and removes it. |
| `krtools-isupper` | Classifies the letter `c` with both upper-case tests. |
| `krtools-alloc` | Allocates, fills, prints and frees two strings, then hands an extra region to the allocator. |

```
echo "1 2 3 4 5r hello 2.3" | krtools-minscanf
```

## Library pieces

- `krtools.case.convert_case(text, name)` converts ASCII letters to upper or
  lower case when `name` is `"upper"` or `"lower"`; any other name raises
  `ValueError`.
- `krtools.minprintf.minprintf(fmt, *args)` returns the formatted text for the
  `%d %i %o %x %X %u %c %s %f %e %E %g %G %p` conversions. Any other character
  after `%` is output as is; too few arguments raise `ValueError`.
- `krtools.minscanf.InputScanner(text).scan(fmt)` returns one value per
  `%d %i %o %u %x %c %s %e %f %g` conversion, continuing where the previous
  call stopped, with `None` where the input did not match.
- `krtools.calculator.evaluate(text)` returns the result and the error messages;
  `RPNCalculator` offers `push`, `pop` and `apply` one token at a time.
- `krtools.symtab.SymbolTable` is a hashed symbol table with `install`,
  `lookup` and `undef`.
- `krtools.stdio.FileTable` and `krtools.stdio.BufferedFile` give a buffered
  file layer over raw file descriptors with `getc`, `putc`, `flush`, `seek` and
  `close`. A table holds twenty slots, the first three for standard input,
  output and error; `FileTable.open` and `krtools.stdio.open_file` open a file
  in mode `r`, `w` or `a` and raise `TooManyOpenFiles` when no slot is free.
- `krtools.allocator.Allocator` is a first-fit free-list allocator with
  `malloc`, `calloc`, `free`, `bfree` and `morecore`, `read` and `write` to
  reach the allocated bytes, and `free_blocks` to inspect the free list.
  Invalid sizes and addresses raise `ValueError`; a heap that cannot grow
  raises `MemoryError`.

```python
from krtools.allocator import Allocator

heap = Allocator()
address = heap.malloc(27)
heap.write(address, b"Content from malloc here.")
print(heap.read(address, 25))
heap.free(address)
```

## What it does not do

- Case conversion has no command; it is available only from Python.
- The allocator manages a simulated heap held in a Python byte array, not the
  process's memory.
- `krtools-define` handles only object-like macros whose value is a single
  alphanumeric word; it has no function-like macros, conditionals or includes.
- `krtools-fsize` needs the `pwd` and `grp` modules to show owners; where they
  are missing the user and group are left out.