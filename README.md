# sushi_shell

The pieces a Bash-compatible shell uses to read input and turn words into
arguments.

## What is in the package

- `sushi_shell.state.ShellState` holds the shell's state: parameters (taken
  from the environment, plus `0`, `?`, `PS1` and `PS2`), arrays, positional
  parameters, option flags, history, enabled shell options (`shopts`, for
  example `"extglob"`) and an interrupt flag. It has `get_param`,
  `set_param`, `get_array`, `set_array` and `get_position_params`.
  `ShellState.exit()` raises `ShellExit` with the status held in `$?`.
  `input_interrupt_check(feeder, state)` throws away pending input after an
  interrupt.
- `sushi_shell.feeder.Feeder` holds the text that has not been parsed yet
  and has the `scanner_*` methods that measure tokens such as blanks, names,
  operators, quotes and comments. When a construct is unfinished, or a line
  ends in a backslash, it reads another line from `state.stdin`. `feed_line`
  raises `InputEof` or `InputInterrupted`.
- `sushi_shell.word.Word` parses a word with `Word.parse(feeder, state,
  as_operand)` and expands it with `eval`, `eval_as_value`,
  `eval_for_case_word` and `eval_for_case_pattern`. Expansion covers braces,
  tilde, parameters (`$1`, `$?`, `$name`), `!$` history references, field
  splitting and pathname expansion.
- The subword classes are `SimpleSubword`, `SingleQuoted`, `EscapedChar`,
  `Parameter` and `VarName` in `sushi_shell.subwords`, `BracedParam` in
  `sushi_shell.braced_param`, and `DoubleQuoted` and `ExtGlob` in
  `sushi_shell.quoted`. `BracedParam` handles `${name}`, `${name[i]}`,
  `${name:-word}`, `${name:=word}`, `${name:?word}` and `${name:+word}`.
  `DoubleQuoted` expands `"$@"` to one field per positional parameter.
- `sushi_shell.brace_expansion.expand` expands `{a,b}`, `{1..5}` and
  `{a..z..2}` forms.
- `sushi_shell.glob.compare(word, pattern, extglob)` matches a string
  against a glob pattern. The pattern may use `*`, `?`, `[...]`, `[!...]`
  and escapes. With `extglob` it also takes `?( )`, `*( )`, `+( )`, `@( )`
  and `!( )`. `sushi_shell.directory.glob` and
  `sushi_shell.path_expansion.expand` apply such patterns to the file
  system.
- `sushi_shell.file_check` has the file tests of conditional expressions,
  such as `exists`, `is_dir`, `metadata_comp` (`-ef`, `-nt`, `-ot`) and
  `metadata_check` (`-b`, `-c`, `-p`, `-S`, `-u`, `-g`, `-k` and others).
- `sushi_shell.utils` has `split_words`, `reserved` and `is_wsl`.
  `sushi_shell.error_message` has message builders, and `report` prints an
  error to stderr.

## Installation

```
pip install .
```

## Example

```python
from sushi_shell.feeder import Feeder
from sushi_shell.state import ShellState
from sushi_shell.word import Word

state = ShellState()
state.set_param("name", "world")

feeder = Feeder("a{b,c}-$name")
word = Word.parse(feeder, state, False)
print(word.eval(state))   # ['ab-world', 'ac-world']
```

Glob matching on its own:

```python
from sushi_shell import glob

glob.compare("report.txt", "*.txt", False)      # True
glob.compare("abab", "+(ab)", True)             # True
```

## What the package does not do

This is a library, not a shell you can run. It provides no command-line
program and it does not run commands. It has no pipelines, redirections,
job control or interactive line editing. It does not parse command
substitution `$(...)` or arithmetic expansion `$((...))`. Lines are read
plainly from `state.stdin`.

## Tests

```
pip install .[test]
pytest
```