# yush

A small command shell. It reads commands from the terminal, from a
script file, or from a single command-line option, and runs its own
built-in commands or programs found as files or along `PATH`.

## Installation

    pip install .

## Usage

Start an interactive session:

    yush

Run a single command and exit with its status:

    yush -c 'echo hello world'

Run a script file:

    yush path/to/script.yush

Show help or version:

    yush --help
    yush --version

Options:

| Option | Effect |
| --- | --- |
| `-h`, `--help` | print the help message and exit |
| `-v`, `--version` | print `yush, version 0.6.5` and exit |
| `-c`, `--command TEXT` | run one command line and exit with its status |
| `-i`, `--interactive [BOOL]` | `true` (the default) shows a prompt and edits the line in the terminal; `false` reads plain lines from standard input without a prompt |
| `-o`, `--debug-output PATH` | accepted, but nothing is written to it |

The first argument that is not an option is taken as a script to run.

On start-up the shell needs `HOME` to be set; without it it prints an
error and exits with status 1. It creates `~/.config/yush` if it is
missing, runs `~/.config/yush/config.yush` if that file exists, and
creates `~/.local/share/yush`.

In an interactive session the prompt shows `USER@NAME` and the working
directory (with `~` for the home directory), and, when the last command
failed, its status. The left and right arrow keys move the cursor,
backspace deletes, and the up and down arrow keys step through the
commands run so far in this session. Ctrl-C is ignored by the shell
itself but still reaches programs it starts.

The session ends at end of input or on `exit`. `exit STATUS` ends it with
that status. When the session ends by end of input or by a plain `exit`,
the commands of the session are appended to
`~/.local/share/yush/history`.

## Command syntax

- Words are separated by spaces.
- `"..."` and `'...'` group text into a single word.
- `$NAME` is replaced by the value of the variable `NAME` as a word of
  its own; unset variables give an empty word. The environment is loaded
  into the variables at start-up, together with `SYSTEM` (the name of the
  operating system) and `SHELL` (`yush`).
- `#` starts a comment that runs to the end of the line.
- A line that is exactly the name of an alias is replaced by the alias's
  command line before it is split into words. Aliases that lead back to
  one another are reported as an error.
- In a script, a line ending in `\` is joined with the next line.

## Built-in commands

| Command | Effect |
| --- | --- |
| `alias NAME 'COMMAND'` | make the line `NAME` stand for `COMMAND` |
| `cd PATH` | change directory one component at a time; understands `.`, `..` and `~` |
| `echo WORDS...` | print each word followed by a space, then a newline |
| `function NAME BODY...` | define `NAME`; running it runs the body words joined by spaces as a command line |
| `if A B C` | checks only that at least three arguments follow; evaluates nothing |
| `ls` | list the current directory in name order, hiding dot files and marking directories with `/` |
| `pwd` | print the current directory |
| `set NAME VALUE` | set a shell variable |
| `exit [STATUS]` | leave the interactive shell |

Any other word is looked up as a file, then in each directory of `PATH`,
and run as a program with the remaining words as its arguments. A command
that cannot be found returns status 127.

## What it does not do

There are no pipes, redirections, background jobs, globbing or control
flow: `if` does not run anything. The history file is written but not
read back, so earlier sessions are not available to the arrow keys.

## Using it from Python

```python
from yush.command import Command
from yush.variables import VariableManager

variables = VariableManager()
variables.set("NAME", "world")

command = Command('echo "hello there" $NAME # comment')
command.parse(variables, VariableManager())
print(command.args)  # ['echo', 'hello there', 'world']
```

`yush.shell.Shell` takes an optional environment mapping and the streams
to read from and write to, so it can be driven without a terminal:

```python
import io

from yush.command import Command
from yush.shell import Shell

out = io.StringIO()
shell = Shell(environ={"HOME": "/tmp/home"}, out=out)
command = Command("echo hi")
command.parse(shell.vars, shell.functions)
status = shell.exec_cmd(command)
print(status, out.getvalue())
```

`yush.string_parser.split_on` splits text on one separator, giving no
pieces for empty text and no final empty piece after a trailing
separator.