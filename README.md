# primer

A collection of small tools and library routines, each usable on its own:
line and character counters, temperature conversion, a bit-vector integer
set, an arithmetic expression evaluator, SVG surface plots, GIF and PNG
generators, HTML outline and title extraction, and a few HTTP clients.

## Installing

```
pip install .
```

For running the test suite:

```
pip install .[test]
pytest
```

## Command-line tools

Text filters (read standard input, or named files where noted):

| Command | What it does |
| --- | --- |
| `primer-dup [FILE...]` | print lines that occur more than once, with their counts |
| `primer-dup-read FILE...` | the same, reading each named file whole |
| `primer-dedup` | print each distinct line once, in first-seen order |
| `primer-charcount` | count Unicode characters and UTF-8 encoding lengths |
| `primer-basename` | strip directories and the last suffix from each line |
| `primer-rev` | show a reversal and a rotation, then reverse the integers on each input line |
| `primer-xmlselect NAME...` | print text of XML elements nested under the named elements, in order |
| `primer-outline` | print the element stack of each element of an HTML document |

Arguments, conversions and small demonstrations:

| Command | What it does |
| --- | --- |
| `primer-echo [-n] [-s SEP] ARG...` | print the arguments joined by a separator |
| `primer-hello` | print a greeting |
| `primer-comma NUMBER...` | insert thousands separators |
| `primer-cf NUMBER...` | show each number as Fahrenheit and Celsius, converted |
| `primer-tempflag [-temp 100C]` | print a temperature given in Celsius or Fahrenheit (`C`, `°C`, `F`, `°F`), default 20°C |
| `primer-netflag` | show interface flag bit operations |
| `primer-toposort` | print course prerequisites in topological order |
| `primer-movie` | print a movie list as compact and indented JSON, then the titles |
| `primer-urlvalues` | show lookups in a multi-valued key mapping |
| `primer-bytecounter` | count the bytes of two writes |

Images:

| Command | What it does |
| --- | --- |
| `primer-surface > out.svg` | SVG rendering of the surface sin(r)/r |
| `primer-surface-server` | serve `/plot?expr=...` surfaces of a user expression in `x`, `y` and `r` on localhost:8000 |
| `primer-lissajous > out.gif` | animated GIF of a random Lissajous figure; `primer-lissajous web` serves one on localhost:8000 |
| `primer-mandelbrot > out.png` | 1024×1024 PNG of the Mandelbrot set |

Network:

| Command | What it does |
| --- | --- |
| `primer-fetch URL...` | print the body found at each URL; stop at the first failure |
| `primer-fetchall URL...` | fetch URLs concurrently, reporting times and sizes |
| `primer-outline-url URL...` | print an indented tag outline of each page |
| `primer-title URL...` | print the sole title of each HTML page |
| `primer-wait URL` | wait up to a minute, with exponential back-off, for a server to respond |
| `primer-issues TERM...` | table of matching issues from the GitHub issue search |
| `primer-issues-report TERM...` | text report of matching issues, with their age in days |
| `primer-issues-html TERM...` | HTML table of matching issues |

## Library use

```python
from primer.popcount import pop_count
from primer.strutil import comma, basename
from primer.intset import IntSet
from primer.tempconv import Celsius, c_to_f
from primer.evaluator import parse, format_expr

pop_count(0xFF)                 # 8
comma("1234567890")             # "1,234,567,890"
basename("a/b.c.go")            # "b.c"

s = IntSet()
for n in (1, 144, 9):
    s.add(n)
str(s)                          # "{1 9 144}"
s.has(9)                        # True

c_to_f(Celsius(100))            # 212°F

expr = parse("5 / 9 * (F - 32)")
format_expr(expr)               # "((5 / 9) * (F - 32))"
expr.eval({"F": 212})           # 100.0
```

`parse` and the `check` method of every expression raise
`primer.evaluator.ExprError` for malformed expressions, unknown functions and
wrong argument counts.

Other modules: `primer.geometry` (points, paths, coloured points, circles and
wheels), `primer.graph` (a directed graph and `topo_sort`), `primer.slices`
(growth, filtering, reversal, rotation, sums and a `squares` generator),
`primer.treesort` (sorting through a binary tree), `primer.github`
(`search_issues` and its result types) and `primer.outline` (`parse_html`,
`for_each_node`, `outline_paths`, `outline_tags`).

## What is not included

- There is no command or function for listing the links of an HTML page or
  for crawling from page to page; `primer.outline` and `primer.title` only
  walk a document for its element structure and its title.
- There is no track-list sorting or table-printing tool.