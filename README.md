# miniprintf

A small printf-style formatter. It understands a fixed set of conversions and
nothing else. It has no flags, no field widths and no precision.

| Conversion | Argument                             | Output                                         |
|------------|--------------------------------------|------------------------------------------------|
| `%c`       | a one-character string or a code     | the character (codes are taken modulo 256)     |
| `%s`       | a string or `None`                   | the string, or `(null)` for `None`             |
| `%d`, `%i` | an integer                           | signed decimal, wrapped to 32 bits             |
| `%u`       | an integer                           | unsigned decimal, wrapped to 32 bits           |
| `%x`, `%X` | an integer                           | unsigned hex in lower or upper case, 32 bits   |
| `%p`       | an address (integer or `None`)       | `0x`-prefixed lower-case hex, or `(nil)` for 0 |
| `%%`       | none                                 | a literal `%`                                  |

Any other character after `%` is dropped along with the `%`. It produces no
output and uses no argument.

## Installation

```
pip install miniprintf
```

## Usage

```python
from miniprintf.printf import render, printf, FormatError

render("%s has %d items (%x)", "box", 42, 255)
# 'box has 42 items (ff)'

render("%u", -1)
# '4294967295'

render("%p %p", 0, 0xDEADBEEF)
# '(nil) 0xdeadbeef'

import sys
count = printf("hello %c\n", "!", stream=sys.stdout)
# writes "hello !\n" and returns 8, the number of characters written
```

`printf` writes to `sys.stdout` when no `stream` is given. It writes output as
it produces it. When it raises an error, the text before the fault has already
been written.

### Errors

`FormatError` is a subclass of `ValueError`. The functions raise it when:

- the template is `None`,
- the template ends in a lone `%`, as in `render("100%")`,
- a conversion has no argument left to use.

A `%s` argument that is neither a string nor `None` raises `TypeError`. A `%c`
string that is not exactly one character long raises `ValueError`.

## Single conversions

You can also call each conversion on its own from `miniprintf.conversions`:

```python
from miniprintf.conversions import (
    format_char, format_str, format_signed, format_unsigned,
    format_hex, format_pointer, utoa,
)

format_char(65)            # 'A'
format_str(None)           # '(null)'
format_signed(2**31)       # '-2147483648'
format_unsigned(-1)        # '4294967295'
format_hex(3054, "X")      # 'BEE'
format_pointer(4096)       # '0x1000'
utoa(1234)                 # '1234'
```

`format_hex` raises `ValueError` for any specifier other than `"x"` or `"X"`.

## What it does not do

miniprintf is a library only. It installs no command-line program. It supports
only the conversions listed above and has no width, precision, padding or
length modifiers.

## Running the tests

```
pip install -e ".[test]"
pytest
```