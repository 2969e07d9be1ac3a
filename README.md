# pipex

`pipex` runs commands as a pipeline. It reads from an input file and writes
to an output file, much like this shell line:

```sh
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

## Installation

```sh
pip install .
```

## Usage

This pipes an input file through two or more commands into an output file:

```sh
pipex infile "grep error" "wc -l" outfile
```

You must give at least four arguments: an input file, two commands and an
output file.

- The input file must exist and be readable.
- The output file is created if it is missing and emptied if it exists. This
  happens before any command runs.

### Here-documents

If the first argument begins with `here_doc`, the second argument is a
limiter. Standard input is read line by line up to the first line that is
exactly the limiter. What was read is then fed to the first command.

Each collected line is passed on with one extra newline after it. The output
file is opened for appending rather than emptied.

```sh
pipex here_doc END "cat" "tr a-z A-Z" outfile
```

This form needs at least five arguments. An empty or all-whitespace limiter
is an error, and so is an empty or all-whitespace first command.

### Commands

- Each command is split on single spaces and empty words are dropped. There
  is no shell quoting, globbing or variable expansion.
- A command name is looked up as `<dir>/<name>` in each directory of `PATH`,
  in order. The first executable match is used.

### Errors and exit status

`pipex` writes a message to standard error and exits with status 1 in these
cases:

- there are too few arguments;
- the input file is missing or unreadable;
- the output file cannot be created or opened;
- a command is empty or made only of whitespace;
- `PATH` is not set.

Some stages fail to start, either because the command is not found on
`PATH` or because it cannot be executed. Such a stage is reported on
standard error, and the rest of the pipeline still runs. The stage after it
reads no input.

Otherwise `pipex` exits with status 0. The commands' own exit statuses do
not change it.

## Library

You can also use the package from Python:

- **`pipex.args`**
  - `parse_args(argv, env=None)` checks an argument list, given without the
    program name, and returns a `PipelineSpec`.
  - It raises `PipexError` on any of the errors above.
  - `is_blank`, `search_paths` and `find_command` are also available.
- **`pipex.runner`**
  - `run_pipeline(spec, stdin=None)` runs a `PipelineSpec`.
  - It returns the exit status of every stage. A stage that could not start
    counts as 1.
- **`pipex.heredoc`**
  - `read_lines(stream)` yields the lines of a stream.
  - `collect_here_doc(stream, limiter)` gathers here-document input.
- **`pipex.cli`**
  - `main(argv=None)` is the entry point of the command.
- **`pipex.libft`** holds small helpers:
  - `chars`: ASCII classification, case mapping, `atoi` and `itoa`.
  - `memory`: `bytearray` helpers such as `memset`, `memcpy`, `memmove`,
    `memchr` and `memcmp`.
  - `text`: `split`, `trim`, `substr`, `strncmp`, `strnstr`, `strlcpy`,
    `strlcat` and related functions.
  - `lists`: a singly linked `LinkedList`.
  - `output`: `put_char`, `put_str`, `put_endl` and `put_nbr` for text
    streams.

## What it does not do

`pipex` is not a shell. Each command argument is run directly. There is no
quoting, no redirection inside an argument, no expansion, and no way to run
a built-in shell command.

## Development

```sh
pip install -e ".[test]"
pytest
```