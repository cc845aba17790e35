# nyw

`nyw` sets up a machine from declarative configuration. It reads every
`*.jsonc` file under a configuration directory, then:

1. runs the packages' pre-scripts with `sh`,
2. installs the listed packages that are not installed yet, using the first
   package manager found on `PATH` (pacman, apt, apk, brew, winget, in that
   order), and AUR packages with paru or yay,
3. removes packages that were recorded as installed on the previous run but
   are no longer listed and are still installed,
4. writes dotfiles, from inline content, a local file or an `https://` URL,
5. runs the packages' post-scripts with `sh`,
6. records the installed (non-AUR) package names in `lock.db` inside the
   configuration directory.

## Installation

```
pip install .
```

## Usage

```
nyw
nyw --path ./my-config
```

`--path` selects the configuration directory. Its default is `/etc/nyw`,
or `C:\Program Files\nyw` on Windows. The directory is created if it does
not exist.

Package managers other than paru and yay are invoked through `sudo`. Set
`MOCK` in the environment to log the install, remove and script commands
instead of running them (the `which` lookups and the listing of installed
packages still run):

```
MOCK=1 nyw
```

`LOG` controls output: `INFO` (default), `DEBUG`, `ALL`, or `NONE` to
silence log lines. Messages are looked up by the language part of `LANG`,
with English as the fallback.

On any failure — a package manager not found, a command that cannot be
started or exits non-zero, an unreadable or malformed configuration file —
the error message is printed to standard error and `nyw` exits with
status 1.

## Configuration

Files may contain `//` and `/* */` comments and trailing commas.

```jsonc
{
  // plain package names or objects
  "packages": [
    "git",
    {
      "name": "neovim",
      "dot_configs": [
        { "src": "https://example.com/init.lua", "dest": "/home/me/.config/nvim/init.lua" },
        { "content": "set number\n", "dest": "/home/me/.vimrc" }
      ],
      "pre_script": [{ "bin": "/etc/nyw/scripts/before.sh" }],
      "post_script": [{ "bin": "/etc/nyw/scripts/after.sh" }]
    },
    { "name": "paru-bin", "aur": true },
  ]
}
```

Configuration may be split across any number of files and subdirectories;
they are read in sorted path order and their package lists are merged. A
dot config with both `src` and `content` is copied from `src`. Dot configs
and scripts of AUR packages are not applied.

## Library use

The pieces are usable on their own: `nyw.config.get_merged_config`,
`nyw.package_manager.PackageManager` with `detect_package_manager` and
`detect_aur_helper`, `nyw.applications.get_applications_to_install` and
`get_applications_to_remove`, the `nyw.db` functions over a
`sqlite3.Connection`, and `nyw.cli.main(argv)`, which returns the exit
status. Errors derive from `nyw.errors.ApplicationError`.

## Limitations

- The list of installed packages is always read with `<manager> -Qqe`, so
  detection of already-installed packages only works with pacman-style
  managers.
- Packages are not upgraded, and the lock records a fixed placeholder hash
  rather than a hash of the configuration.
- `nyw` does not check that it runs as root and does not ask for
  confirmation before changing the system.

## Running the tests

```
pip install .[test]
pytest
```