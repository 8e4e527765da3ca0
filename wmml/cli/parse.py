from argparse import ArgumentParser, HelpFormatter, ArgumentTypeError
from pathlib import Path

from ..standard import Context

from .output import Output
from .lang import get as _

from typing import Optional, Type, List


# The following classes are only used for type checking and represent a typed namespace
# as produced by the arguments registered to the argument parser.

class RootNs:
    main_dir: Optional[Path]
    work_dir: Optional[Path]
    out_kind: str
    verbose: int
    # Initialized by main function after argument parsing.
    out: Output
    context: Context

class SearchNs(RootNs):
    input: Optional[str]

class StartNs(RootNs):
    dry: bool
    jvm: Optional[str]
    memory: Optional[int]
    system_memory: bool
    username: str
    version: str


def register_arguments() -> ArgumentParser:
    parser = ArgumentParser(allow_abbrev=False, prog="wmml", description=_("args"))
    parser.add_argument("--main-dir", help=_("args.main_dir"), type=Path)
    parser.add_argument("--work-dir", help=_("args.work_dir"), type=Path)
    parser.add_argument("--output", help=_("args.output"), dest="out_kind", choices=get_outputs(), default="human-color")
    parser.add_argument("-v", dest="verbose", help=_("args.verbose"), action="count", default=0)
    register_subcommands(parser.add_subparsers(title="subcommands", dest="subcommand"))
    return parser


def register_subcommands(subparsers):
    register_search_arguments(subparsers.add_parser("search", help=_("args.search")))
    register_start_arguments(subparsers.add_parser("start", help=_("args.start")))
    register_show_arguments(subparsers.add_parser("show", help=_("args.show")))


def register_search_arguments(parser: ArgumentParser):
    parser.add_argument("input", nargs="?")


def register_start_arguments(parser: ArgumentParser):
    parser.formatter_class = new_help_formatter_class(40)
    parser.add_argument("--dry", help=_("args.start.dry"), action="store_true")
    parser.add_argument("--jvm", help=_("args.start.jvm"))
    parser.add_argument("--memory", help=_("args.start.memory"), type=memory_from_str, metavar="MB")
    parser.add_argument("--system-memory", help=_("args.start.system_memory"), action="store_true")
    parser.add_argument("-u", "--username", help=_("args.start.username"), metavar="NAME", default="Player")
    parser.add_argument("version", help=_("args.start.version"))


def register_show_arguments(parser: ArgumentParser):
    subparsers = parser.add_subparsers(title="subcommands", dest="show_subcommand")
    subparsers.required = True
    subparsers.add_parser("about", help=_("args.show.about"))


def new_help_formatter_class(max_help_position: int) -> Type[HelpFormatter]:

    class CustomHelpFormatter(HelpFormatter):
        def __init__(self, prog):
            super().__init__(prog, max_help_position=max_help_position)

    return CustomHelpFormatter


def get_outputs() -> List[str]:
    return ["human-color", "human", "machine"]


def memory_from_str(s: str) -> int:
    try:
        memory = int(s)
    except ValueError:
        memory = 0
    if memory <= 0:
        raise ArgumentTypeError(_("args.start.memory.invalid", given=s))
    return memory
