# ox

`ox` is a plugin-driven command line tool for working on Go web projects.
Every command is a plugin. The CLI finds the command named on the command
line (or its alias), passes the arguments to every plugin that parses
flags, hands the full plugin list to every plugin that receives plugins,
and runs the command from the project's root folder. The root folder is
the nearest folder, going upwards from the current one, that holds a
`go.mod`.

## Installation

```
pip install .
```

## Usage

```
ox help              # list the registered commands
ox help generate     # help for a single command
ox version           # print the version
ox new myapp         # run the registered initializers for a new app
ox new myapp --force # replace an existing folder first
ox generate          # list the available generators
ox generate template users/index
ox dev               # run the registered development plugins
ox fix               # list the registered fixers
```

Aliases: `h` for help, `v` for version, `g` for generate, `d` for dev.

`version` and `new` use the current folder as root. The other commands
need a `go.mod` in the current folder or one above it; without one,
`ox` prints `[error] go.mod not found` and exits with status 1.

`ox generate template NAME` creates an empty `NAME.plush.html` under
`app/templates`, creating sub folders as needed. Any extension in `NAME`
is replaced by `.plush.html`. The `app/templates` folder must already
exist, and an existing template is never overwritten.

When the current folder holds `cmd/ox/main.go` and a `go.mod` that
declares a module, `ox` does not run its own commands: it runs
`go run cmd/ox/main.go` with the same arguments, after setting
`GO111MODULE=on` and `CGO_ENABLED=0`. A failing run makes `ox` exit
with status 1.

## Using it as a library

The `ox.cli` module keeps a shared CLI instance that starts with the base
plugins (`base_plugins()`). Add your own plugins with `use`, remove some
by name with `remove`, or empty the list with `clear`, then call `run`
(or `wrap`, which first looks for `cmd/ox/main.go`):

```python
from ox import cli
from ox.plugins import Command


class Hello(Command):
    name = "hello"

    def run(self, root, args):
        print(f"hello from {root}")

    def find_root(self):
        return "."


cli.use(Hello())
cli.remove("fix")
cli.run(["ox", "hello"])
```

A command that defines `find_root` is used even where no `go.mod` is
found. You can also build a separate `ox.cli.Cli` with its own list of
plugins.

The interfaces plugins implement are in `ox.plugins`: `Plugin`,
`Command`, `RootFinder`, `Aliaser`, `FlagParser`, `HelpTexter`,
`PluginReceiver` and `Subcommander`. They are checked by the members a
plugin has, so a plugin need not inherit from them.

Lifecycle commands collect plugins by the roles they play:

- `ox.lifecycle.dev.DevCommand`: runs every `BeforeDeveloper` in turn,
  then every `Developer` on its own thread; developer errors are logged.
- `ox.lifecycle.fix.FixCommand`: prints the name of every `Fixer`.
- `ox.lifecycle.generate.GenerateCommand`: runs the `Generator` whose
  `invocation_name` matches, then every `AfterGenerator`; raises
  `GenerateError` when no generator is named or none matches.
- `ox.lifecycle.new.NewCommand`: runs every `Initializer`, then every
  `AfterInitializer`, with an `Options` holding the folder, name, module,
  root and arguments; raises `NoNameProvidedError` or
  `FolderExistsError`.

Other modules:

- `ox.info`: `module_path`, `module_name`, `build_name` and
  `root_folder` read the module path from `go.mod` and find the root.
- `ox.tools.model`: `Attr`, `build_attrs`, `default_attrs` and
  `build_imports` turn `name[:type]` declarations into model attributes,
  their Go types and the imports they need.
- `ox.tools.template`: `TemplateGenerator`.
- `ox.tools.help` and `ox.tools.version`: the help and version commands.
- `ox.log`: `info`, `error`, `debug` and `warn` print tagged messages.

## What it does not do

The base plugins include no initializers, no developers and no fixers,
and the only generator is the template generator. So `ox new myapp`
creates no application files by itself, `ox dev` starts nothing, and
`ox fix` changes no code. There are no action, model, resource or
migration generators: `ox.tools.model` only works out attributes and
imports and writes no files. All of these come from plugins you add.

## Tests

```
pip install .[test]
pytest
```