# ftkit

A set of small, dependency-free helpers:

- `ftkit.chars`: ASCII character classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), case mapping (`to_lower`,
  `to_upper`), `atoi` and `itoa`.
- `ftkit.memory`: byte-buffer operations `memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy` and `memmove`. `memmove` works inside
  one buffer and handles overlapping regions.
- `ftkit.strings`: string helpers in the style of the C library. These are
  `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`,
  `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi` and
  `striteri`. Searches return an index, or `None` when nothing is found.
  `strlcpy` and `strlcat` return the resulting text together with the
  length they tried to create.
- `ftkit.lists`: `LinkedList`, a singly linked list of `Node`s. It has
  `add_front`, `add_back`, `last`, `each`, `map` and `clear`.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. Each
  writes directly to a file descriptor and returns the number of bytes
  written.
- `ftkit.printf`: a minimal formatter for `%c %s %p %d %i %u %x %X %%`.
  `sprintf` returns the text. `printf` writes it to standard output and
  returns its length.
  - `%s` with `None` gives `(null)`.
  - `%p` with `None` or 0 gives `(nil)`.
  - `%d`, `%i`, `%u`, `%x` and `%X` use 32-bit arithmetic.
  - Unknown conversions produce nothing.
  - Too few arguments raise `ValueError`.
- `ftkit.lines`: `LineReader` reads a file descriptor one line at a time
  with a fixed buffer size (default 42). It keeps separate leftover data
  for each descriptor. `read_line` returns `bytes` with the newline
  included, or `None` at end of input. `lines` yields the remaining
  lines. `get_next_line` uses a shared reader.
- `ftkit.stacks`: the two-stack `Machine`. It has the instructions
  `sa sb ss pa pb ra rb rr rra rrb rrr` and records each one that changed
  a stack in `operations`. The module also provides the input helpers
  `atoll`, `is_valid_integer`, `parse_arguments`, `is_sorted` and `rank`.
- `ftkit.push_swap`: a greedy solver (`solve`, `sort_machine`,
  `sort_three`) together with its helper functions.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.printf import sprintf
from ftkit.strings import split
from ftkit.push_swap import solve

sprintf("%d %x %s", 42, 255, None)   # '42 ff (null)'
split("  hello  world ", " ")        # ['hello', 'world']
solve([2, 1, 3])                     # ['sa']
```

## Commands

Print the instructions that sort a list of integers, one per line:

```
ftkit-push-swap 3 2 1 5 4
```

If the input is already sorted, nothing is printed. Invalid input prints
`Error` on standard error. Input is invalid when it holds non-integers,
values outside the 32-bit signed range, or duplicates.

Print the first line of a file:

```
ftkit-next-line path/to/file.txt
```

Without a path, the command reads `test1.txt` in the current directory.

## Limitations

There is no command that reads a list of instructions and checks whether
they sort a given input. The solver only produces instructions.

## Tests

```
pip install .[test]
pytest
```