"""Main entry point of the WMML command line interface.
"""

import sys

from .parse import register_arguments, RootNs, SearchNs, StartNs
from .output import Output, HumanOutput, MachineOutput
from .lang import get as _

from wmml.standard import Context, Version, LaunchOptions, Watcher, SimpleWatcher, WatcherGroup, \
    ManifestReadError, SpawnError, \
    ManifestLoadedEvent, LibrariesResolvingEvent, LibrarySkippedEvent, LibrariesResolvedEvent
from wmml import LAUNCHER_NAME, LAUNCHER_VERSION, LAUNCHER_AUTHORS, LAUNCHER_COPYRIGHT

from typing import cast, Optional, List, Union, Dict, Callable, Any


EXIT_OK = 0
EXIT_FAILURE = 1

CommandHandler = Callable[[Any], Any]
CommandTree = Dict[str, Union[CommandHandler, "CommandTree"]]


def main(args: Optional[List[str]] = None):
    """Main entry point of the CLI. This function parses the input arguments and try to
    find a command handler to dispatch to. These command handlers are specified by the
    `get_command_handlers` function.
    """

    parser = register_arguments()
    ns: RootNs = cast(RootNs, parser.parse_args(args or sys.argv[1:]))

    # Setup common objects in the namespace.
    ns.out = get_output(ns.out_kind)
    ns.context = Context(ns.main_dir, ns.work_dir)

    # Find the command handler and run it.
    command_handlers = get_command_handlers()
    command_attr = "subcommand"
    while True:
        command = getattr(ns, command_attr)
        handler = command_handlers.get(command)
        if handler is None:
            parser.print_help()
            sys.exit(EXIT_FAILURE)
        elif callable(handler):
            cmd(handler, ns)
        elif isinstance(handler, dict):
            command_attr = f"{command}_{command_attr}"
            command_handlers = handler
            continue
        sys.exit(EXIT_OK)


def get_output(kind: str) -> Output:
    """Internal function that construct the output depending on its kind.
    The kind is constrained by choices set to the arguments parser.
    """

    if kind == "human-color":
        return HumanOutput(True)
    elif kind == "human":
        return HumanOutput(False)
    elif kind == "machine":
        return MachineOutput()
    else:
        raise ValueError()


def get_command_handlers() -> CommandTree:
    """Internal function returns the tree of command handlers for each subcommand
    of the CLI argument parser.
    """

    return {
        "search": cmd_search,
        "start": cmd_start,
        "show": {
            "about": cmd_show_about,
        },
    }



def cmd(handler: CommandHandler, ns: RootNs):
    """Generic command handler that launch the given handler with the given namespace,
    it handles error in order to pretty print them.
    """

    try:
        handler(ns)
        sys.exit(EXIT_OK)

    except ValueError as error:
        for arg in error.args:
            ns.out.event("FAILED", "echo", echo=arg)

    except KeyboardInterrupt:
        ns.out.event("FAILED", "keyboard_interrupt")

    except OSError:
        ns.out.event("FAILED", "error.os")

        import traceback
        traceback.print_exc()

    sys.exit(EXIT_FAILURE)


def cmd_search(ns: SearchNs):

    rows = [(_("search.name"), _("search.main_class"))]

    for handle in ns.context.list_versions():
        if ns.input is not None and ns.input not in handle.id:
            continue
        try:
            main_class = handle.read_manifest().main_class
        except ManifestReadError as error:
            main_class = f"<{error.code}>"
        rows.append((handle.id, main_class))

    if len(rows) == 1:
        ns.out.event("INFO", "search.empty", dir=ns.context.versions_dir)
    else:
        ns.out.versions(rows)


def cmd_start(ns: StartNs):

    version = Version(ns.version, context=ns.context)
    version.player_name = ns.username
    version.options = LaunchOptions(ns.jvm, ns.memory, ns.system_memory)

    watcher = WatcherGroup(StartWatcher(ns))
    if ns.verbose >= 1:
        watcher.add(VerboseWatcher(ns))

    try:

        plan = version.prepare(watcher=watcher)

        if ns.dry or ns.verbose >= 1:
            ns.out.event("INFO", "start.command", command=plan.command_line())

        # If not dry run, run it!
        if not ns.dry:
            process = plan.run()
            ns.out.event("OK", "start.spawned", pid=process.pid)

        sys.exit(EXIT_OK)

    except ManifestReadError as error:
        ns.out.event("FAILED", f"start.version.error.{error.code}", path=error.path)

    except SpawnError as error:
        ns.out.event("FAILED", "start.spawn_error", executable=error.executable, message=str(error.error))

    sys.exit(EXIT_FAILURE)


def cmd_show_about(ns: RootNs):
    ns.out.print(f"Launcher: {LAUNCHER_NAME}\n")
    ns.out.print(f"Version: {LAUNCHER_VERSION}\n")
    ns.out.print(f"Authors: {', '.join(LAUNCHER_AUTHORS)}\n")
    ns.out.print(f"{LAUNCHER_COPYRIGHT}\n")


class StartWatcher(SimpleWatcher):

    def __init__(self, ns: StartNs) -> None:

        def manifest_loaded(e: ManifestLoadedEvent) -> None:
            ns.out.event("OK", "start.version.loaded", version=e.version, main_class=e.main_class)

        def libraries_resolved(e: LibrariesResolvedEvent) -> None:
            if e.skipped_count:
                ns.out.event("OK", "start.libraries.resolved.skipped", count=e.count, skipped_count=e.skipped_count)
            else:
                ns.out.event("OK", "start.libraries.resolved", count=e.count)

        super().__init__({
            ManifestLoadedEvent: manifest_loaded,
            LibrariesResolvingEvent: lambda e: ns.out.event("..", "start.libraries.resolving"),
            LibrariesResolvedEvent: libraries_resolved,
        })


class VerboseWatcher(Watcher):
    """Watcher added with -v, it reports every library left out of the class path.
    """

    def __init__(self, ns: StartNs) -> None:
        self.out = ns.out

    def handle(self, event: Any) -> None:
        if isinstance(event, LibrarySkippedEvent):
            self.out.event("WARN", f"start.libraries.skipped.{event.code}", name=event.name)
