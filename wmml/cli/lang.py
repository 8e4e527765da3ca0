"""CLI languages management.
"""

from wmml.standard import ManifestReadError, DependencyResolutionSkip
from wmml.util import jvm_bin_filename

from typing import Optional


def get_raw(key: str, kwargs: Optional[dict]) -> str:
    """Get a message translated using the given keyword formatting arguments.

    :param key: The key of the message to translate.
    :param kwargs: The keyword formatting dictionary.
    :return: Translated message, or the key itself if not found.
    """
    try:
        return lang[key].format_map(kwargs or {})
    except KeyError:
        return key


def get(key: str, **kwargs) -> str:
    return get_raw(key, kwargs)


lang = {
    # Args root
    "args": "WMML launches Minecraft versions already installed in a .minecraft "
        "directory, as installed by the official launcher.",
    "args.main_dir": "Set the main directory where libraries, assets and versions are installed.",
    "args.work_dir": "Set the working directory where the game run, defaults to the main directory.",
    "args.output": "Set the output format of the launcher, defaults to human-color.",
    "args.verbose": "Enable verbose output, -v prints the launch command and skipped libraries.",
    # Args search
    "args.search": "Search for installed versions.",
    # Args start
    "args.start": "Start an installed Minecraft version.",
    "args.start.version": "Identifier of the installed version.",
    "args.start.dry": "Simulate game starting, the command line is printed.",
    "args.start.jvm": f"Set a custom JVM '{jvm_bin_filename}' executable path. If this argument is omitted "
        f"'{jvm_bin_filename}' is searched in the PATH.",
    "args.start.memory": "Set the heap size of the JVM in megabytes.",
    "args.start.memory.invalid": "invalid memory '{given}', expected a positive number of megabytes",
    "args.start.system_memory": "Let the JVM choose its heap size, overrides --memory.",
    "args.start.username": "Set a custom user name to play, defaults to Player.",
    # Args show
    "args.show": "Show and debug various data.",
    "args.show.about": "Display authors, version and license of WMML.",
    # Common
    "echo": "{echo}",
    "keyboard_interrupt": "Keyboard interrupted.",
    # Common errors
    "error.os": "An unexpected OS error happened:",
    # Command search
    "search.name": "Identifier",
    "search.main_class": "Main class",
    "search.empty": "No version found in {dir}",
    # Command start
    "start.version.loaded": "Loaded version {version} ({main_class})",
    f"start.version.error.{ManifestReadError.NOT_FOUND}": "Version not found: {path}",
    f"start.version.error.{ManifestReadError.UNREADABLE}": "Version metadata cannot be read: {path}",
    f"start.version.error.{ManifestReadError.INVALID_JSON}": "Version metadata is not valid JSON: {path}",
    f"start.version.error.{ManifestReadError.INVALID_FORMAT}": "Version metadata is not an object: {path}",
    f"start.version.error.{ManifestReadError.MISSING_ID}": "Version metadata has no id: {path}",
    f"start.version.error.{ManifestReadError.MISSING_MAIN_CLASS}": "Version metadata has no main class: {path}",
    "start.libraries.resolving": "Checking libraries...",
    "start.libraries.resolved": "Checked {count} libraries",
    "start.libraries.resolved.skipped": "Checked {count} libraries ({skipped_count} skipped)",
    f"start.libraries.skipped.{DependencyResolutionSkip.INVALID_SPECIFIER}": "Skipped library with invalid name '{name}'",
    f"start.libraries.skipped.{DependencyResolutionSkip.NOT_FOUND}": "Skipped library not installed {name}",
    "start.command": "Command: {command}",
    "start.spawned": "Launched the game (pid {pid})",
    "start.spawn_error": "Failed to start '{executable}': {message}",
}
