#!/usr/bin/env python3
"""Entry point for the rit CLI."""

from __future__ import annotations

import argparse
import subprocess
import sys
from contextlib import redirect_stdout
from textwrap import dedent
from typing import Sequence

from ritchie.adapters.fs_directory import FSDirManager
from ritchie.adapters.tutorial.file_finder import FileTutorialFinder, FileTutorialSetter
from ritchie.adapters.version.http_resolver import HttpVersionResolver
from ritchie.app.lifecycle import CommandLifecycle
from ritchie.app.version import version_flag
from ritchie.domain.command import (
    COMPLETE_MARKER,
    ROOT_COMMAND,
    command_path,
    is_completion_invocation,
)
from ritchie.domain.tutorial import TUTORIAL_STATES
from ritchie.ports.directory import DirectoryError
from ritchie.ports.tutorial import TutorialFinderError
from ritchie.ports.version import VersionResolver
from ritchie.settings import SETTINGS
from ritchie.utils.telemetry import record_event

CMD_SHORT_DESCRIPTION = "rit is a NoOps CLI"
CMD_DESCRIPTION = dedent(
    """
    A CLI that developers can build and operate
    your applications without help from the infra staff.
    Complete documentation available at https://github.com/ZupIT/ritchie-cli
    """
).strip()

COMPLETION_SHELLS = ("bash", "zsh", "fish", "powershell")

_BASH_COMPLETION = dedent(
    """
    # rit bash completion
    _rit_complete() {
        local IFS=$'\\n'
        COMPREPLY=( $(rit __complete "${COMP_WORDS[@]:1:COMP_CWORD}" 2>/dev/null) )
    }
    complete -F _rit_complete rit
    """
).lstrip()

_ZSH_COMPLETION = dedent(
    """
    #compdef rit
    autoload -U +X bashcompinit && bashcompinit
    _rit_complete() {
        local IFS=$'\\n'
        COMPREPLY=( $(rit __complete "${COMP_WORDS[@]:1:COMP_CWORD}" 2>/dev/null) )
    }
    complete -F _rit_complete rit
    """
).lstrip()

_FISH_COMPLETION = dedent(
    """
    # rit fish completion
    complete -c rit -f -a '(rit __complete (commandline -opc)[2..-1] (commandline -ct) 2>/dev/null)'
    """
).lstrip()

_POWERSHELL_COMPLETION = dedent(
    """
    # rit powershell completion
    Register-ArgumentCompleter -Native -CommandName rit -ScriptBlock {
        param($wordToComplete, $commandAst, $cursorPosition)
        $words = @($commandAst.CommandElements | Select-Object -Skip 1 | ForEach-Object { $_.ToString() })
        if ($wordToComplete -eq '') { $words += '' }
        rit __complete @words | ForEach-Object {
            [System.Management.Automation.CompletionResult]::new($_, $_, 'ParameterValue', $_)
        }
    }
    """
).lstrip()

COMPLETION_SCRIPTS = {
    "bash": _BASH_COMPLETION,
    "zsh": _ZSH_COMPLETION,
    "fish": _FISH_COMPLETION,
    "powershell": _POWERSHELL_COMPLETION,
}


def _build_resolver() -> VersionResolver:
    return HttpVersionResolver(SETTINGS.stable_version_url, timeout=SETTINGS.version_timeout)


def _build_lifecycle() -> CommandLifecycle:
    return CommandLifecycle(
        SETTINGS,
        FSDirManager(),
        FileTutorialFinder(SETTINGS.tutorial_file),
        _build_resolver(),
    )


class _VersionAction(argparse.Action):
    """``--version`` resolved lazily so plain invocations skip the extra fetch."""

    def __init__(self, option_strings: Sequence[str], dest: str = argparse.SUPPRESS, default: str = argparse.SUPPRESS, help: str | None = None) -> None:  # noqa: A002
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):  # noqa: ANN001
        sys.stdout.write(f"{ROOT_COMMAND} version {version_flag(SETTINGS, _build_resolver())}")
        sys.stdout.flush()
        parser.exit()


def _help_cmd(args: argparse.Namespace) -> int:
    build_parser().print_help()
    return 0


def _init_cmd(args: argparse.Namespace) -> int:
    directory = FSDirManager()
    target = SETTINGS.commons_repo_dir
    already = directory.exists(target)
    try:
        directory.create(target)
    except DirectoryError as exc:
        print(f"{ROOT_COMMAND}: {exc}", file=sys.stderr)
        record_event(SETTINGS, "init", {"status": "failed", "error": str(exc)}, level="error")
        return 1
    record_event(SETTINGS, "init", {"status": "ok", "already_initialized": already})
    if already:
        print(f"{ROOT_COMMAND} is already initialized at {SETTINGS.home_dir}")
    else:
        print(f"Initialization successful! {ROOT_COMMAND} home: {SETTINGS.home_dir}")
    return 0


def _upgrade_cmd(args: argparse.Namespace) -> int:
    mode = args.mode
    if mode == "print":
        print(
            "Run one of:\n"
            "  pipx install ritchie --force\n"
            f"  {sys.executable} -m pip install --upgrade ritchie",
            file=sys.stdout,
        )
        record_event(SETTINGS, "upgrade", {"mode": "print"})
        return 0

    if mode == "pipx":
        command = ["pipx", "install", "ritchie", "--force"]
    else:
        command = [sys.executable, "-m", "pip", "install", "--upgrade", "ritchie"]

    try:
        result = subprocess.run(command)
    except OSError as exc:
        print(f"{ROOT_COMMAND}: unable to run {command[0]}: {exc}", file=sys.stderr)
        record_event(SETTINGS, "upgrade", {"mode": mode, "error": str(exc)}, level="error")
        return 1
    record_event(SETTINGS, "upgrade", {"mode": mode, "exit_code": result.returncode})
    return result.returncode


def _tutorial_cmd(args: argparse.Namespace) -> int:
    if args.enabled is None:
        try:
            holder = FileTutorialFinder(SETTINGS.tutorial_file).find()
        except TutorialFinderError as exc:
            print(f"{ROOT_COMMAND}: {exc}", file=sys.stderr)
            return 1
        print(f"Current tutorial status: {holder.current}")
        return 0
    holder = FileTutorialSetter(SETTINGS.tutorial_file).set(args.enabled)
    record_event(SETTINGS, "tutorial.set", {"state": holder.current})
    print(f"Tutorial {holder.current}")
    return 0


def _completion_cmd(args: argparse.Namespace) -> int:
    sys.stdout.write(COMPLETION_SCRIPTS[args.shell])
    return 0


def _subcommands(parser: argparse.ArgumentParser) -> dict[str, argparse.ArgumentParser]:
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            return dict(action.choices)
    return {}


def complete_words(words: Sequence[str]) -> list[str]:
    """Return subcommand names matching the last word of a partial command line."""

    parser = build_parser()
    *complete, prefix = list(words) or [""]
    for word in complete:
        if word.startswith("-"):
            continue
        children = _subcommands(parser)
        if word not in children:
            return []
        parser = children[word]
    return sorted(
        name
        for name in _subcommands(parser)
        if name.startswith(prefix)
    )


def _complete_cmd(args: argparse.Namespace) -> int:
    for candidate in complete_words(args.words):
        print(candidate)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=ROOT_COMMAND,
        description=f"{CMD_SHORT_DESCRIPTION}\n\n{CMD_DESCRIPTION}",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action=_VersionAction, help="show version information and exit")
    parser.add_argument("--stdin", action="store_true", default=False, help="input by stdin")

    sub = parser.add_subparsers(dest="command", metavar="<command>")

    def add_command(name: str, help_text: str | None = None) -> argparse.ArgumentParser:
        if help_text is None:
            cmd = sub.add_parser(name)
        else:
            cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--stdin", action="store_true", default=argparse.SUPPRESS, help="input by stdin")
        return cmd

    help_cmd = add_command("help", "Help about any command")
    help_cmd.set_defaults(func=_help_cmd, command_path=command_path("help"))

    init_cmd = add_command("init", "Initialize rit configuration")
    init_cmd.set_defaults(func=_init_cmd, command_path=command_path("init"))

    upgrade_cmd = add_command("upgrade", "Upgrade rit to the latest stable version")
    upgrade_cmd.add_argument(
        "--mode",
        choices=["print", "pip", "pipx"],
        default="print",
        help="print the upgrade command or run it with pip/pipx (default: print)",
    )
    upgrade_cmd.set_defaults(func=_upgrade_cmd, command_path=command_path("upgrade"))

    tutorial_cmd = add_command("tutorial", "Enable or disable the tutorial")
    tutorial_cmd.add_argument("--enabled", choices=TUTORIAL_STATES, default=None, help="set tutorial state")
    tutorial_cmd.set_defaults(func=_tutorial_cmd, command_path=command_path("tutorial"))

    completion_cmd = add_command("completion", "Generate shell completion scripts")
    completion_sub = completion_cmd.add_subparsers(dest="shell", metavar="<shell>", required=True)
    for shell in COMPLETION_SHELLS:
        shell_cmd = completion_sub.add_parser(shell, help=f"Generate the {shell} completion script")
        shell_cmd.set_defaults(func=_completion_cmd, shell=shell, command_path=command_path("completion", shell))

    return parser


def main(argv: list[str] | None = None) -> int:
    raw_args = sys.argv[1:] if argv is None else list(argv)
    if raw_args[:1] == [COMPLETE_MARKER]:
        # partial words such as "--he" must reach the completer untouched
        args = argparse.Namespace(words=raw_args[1:], stdin=False)
        path = command_path(COMPLETE_MARKER)
        handler = _complete_cmd
    else:
        args = build_parser().parse_args(raw_args)
        path = getattr(args, "command_path", ROOT_COMMAND)
        handler = getattr(args, "func", _help_cmd)

    lifecycle = _build_lifecycle()
    try:
        decision = lifecycle.pre_run(path)
    except DirectoryError as exc:
        print(f"{ROOT_COMMAND}: {exc}", file=sys.stderr)
        return 1
    if not decision.should_proceed:
        print(decision.message)
        sys.stdout.flush()
        return decision.exit_code

    exit_code = handler(args)

    try:
        if is_completion_invocation(path):
            # stdout carries completion candidates for the shell
            with redirect_stdout(sys.stderr):
                lifecycle.post_run(path)
        else:
            lifecycle.post_run(path)
    except TutorialFinderError as exc:
        print(f"{ROOT_COMMAND}: {exc}", file=sys.stderr)
        return 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
