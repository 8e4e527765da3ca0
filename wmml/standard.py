"""Definition of the standard launch pipeline for versions using the metadata format used
by Mojang. A version manifest installed in the game's main directory is read, its
libraries are resolved into a class path, its game arguments are composed and everything
is assembled into a launch plan that is finally given to a runner.

Nothing is downloaded or installed here, the version and its libraries must already be
present in the main directory.
"""

from subprocess import Popen
from functools import reduce
from json import JSONDecodeError
from pathlib import Path
import platform
import json
import os

from .util import jvm_bin_filename, replace_vars, LibrarySpecifier
from . import LAUNCHER_NAME, LAUNCHER_VERSION

from typing import Optional, Iterator, Dict, List, Any, Callable


# Fixed values given to the game in place of a real authentication.
OFFLINE_UUID = "00000000-0000-0000-0000-000000000000"
OFFLINE_ACCESS_TOKEN = "0" * 32
OFFLINE_USER_TYPE = "legacy"
VERSION_TYPE = f"{LAUNCHER_NAME} {LAUNCHER_VERSION}"

# Name of the natives directory in a version's directory.
NATIVES_DIR_NAME = "natives-windows-x86_64"


class Context:
    """Context of the game's installation and runtime. This defines various directories
    where versions, assets and libraries are stored, and also a working directory from
    where the game will run.
    """

    def __init__(self,
        main_dir: Optional[Path] = None,
        work_dir: Optional[Path] = None
    ) -> None:
        """Construct a Minecraft installation context.

        :param main_dir: The main directory where versions, assets and libraries are
        installed. If not specified this path will be set the usual `.minecraft`.
        :param work_dir: The working directory from where the game is run, the game stores
        thing like saves, resource packs and options. This defaults to `main_dir` if not
        specified.
        """

        main_dir = (get_minecraft_dir() if main_dir is None else Path(main_dir)).absolute()
        self.main_dir = main_dir
        self.work_dir = main_dir if work_dir is None else Path(work_dir).absolute()
        self.versions_dir = main_dir / "versions"
        self.assets_dir = main_dir / "assets"
        self.libraries_dir = main_dir / "libraries"

    def get_version(self, version: str) -> "VersionHandle":
        """Get a version's handle.
        """
        return VersionHandle(version, self.versions_dir / version)

    def list_versions(self) -> "Iterator[VersionHandle]":
        """List installed versions given their handles.
        """
        if self.versions_dir.is_dir():
            for version_dir in sorted(self.versions_dir.iterdir()):
                if version_dir.is_dir():
                    version = VersionHandle(version_dir.name, version_dir)
                    if version.metadata_exists():
                        yield version


class Watcher:
    """Base class for a watcher of the launch process.
    """

    def handle(self, event: Any) -> None:
        """Called when the watcher can handle the given event. Default implementation
        does nothing.
        """


class VersionHandle:
    """This class holds a version handle, giving the paths of its manifest and JAR files
    in the version's directory.
    """

    __slots__ = "id", "dir"

    def __init__(self, id: str, dir: Path) -> None:
        self.id = id
        self.dir = dir

    def metadata_exists(self) -> bool:
        """This function returns true if the version's metadata file exists.
        """
        return self.metadata_file().is_file()

    def metadata_file(self) -> Path:
        """This function returns the computed path of the metadata file.
        """
        return self.dir / f"{self.id}.json"

    def jar_file(self) -> Path:
        """This function returns the computed path of the JAR file of the game.
        """
        return self.dir / f"{self.id}.jar"

    def read_manifest(self) -> "VersionManifest":
        """Read and parse the metadata file of this version.

        :raises ManifestReadError: If the file is missing or invalid.
        """
        return read_manifest(self.metadata_file())

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"<VersionHandle {self.id}>"


class PlatformInfo:
    """Description of the platform that rules and native libraries are resolved for,
    names are the one used by Mojang in version metadata.
    """

    __slots__ = "os_name", "os_arch", "arch_bits"

    def __init__(self, os_name: str, os_arch: Optional[str] = None, arch_bits: Optional[int] = None) -> None:
        self.os_name = os_name
        self.os_arch = os_arch
        if arch_bits is None:
            arch_bits = 64 if os_arch in ("x86_64", "arm64") else 32
        self.arch_bits = arch_bits

    @classmethod
    def current(cls) -> "PlatformInfo":
        """Return the platform of the running system.
        """
        return cls(minecraft_os or "", minecraft_arch, minecraft_arch_bits)

    @property
    def classpath_separator(self) -> str:
        return ";" if self.os_name == "windows" else ":"

    def __repr__(self) -> str:
        return f"<PlatformInfo {self.os_name}/{self.os_arch} ({self.arch_bits} bits)>"


class PlatformRule:
    """A single allow/disallow rule, optionally constrained to an OS name and arch.
    """

    __slots__ = "action", "os_constrained", "os_name", "os_arch"

    def __init__(self, action: Optional[str], os_constrained: bool = False,
        os_name: Optional[str] = None,
        os_arch: Optional[str] = None
    ) -> None:
        self.action = action
        self.os_constrained = os_constrained
        self.os_name = os_name
        self.os_arch = os_arch

    @classmethod
    def from_dict(cls, value: Any) -> "PlatformRule":
        """Parse a rule from metadata, anything malformed is parsed as no constraint.
        """

        if not isinstance(value, dict):
            return cls(None)

        action = value.get("action")
        if not isinstance(action, str):
            action = None

        rule_os = value.get("os")
        if not isinstance(rule_os, dict):
            return cls(action)

        os_name = rule_os.get("name")
        os_arch = rule_os.get("arch")
        return cls(action, True,
            os_name if isinstance(os_name, str) else None,
            os_arch if isinstance(os_arch, str) else None)

    def apply(self, allowed: bool, platform_info: PlatformInfo) -> bool:
        """Apply this rule to the decision computed by previous rules.
        """

        if self.action == "allow":
            if not self.os_constrained:
                return True
            elif self.os_name == platform_info.os_name:
                return self.os_arch is None or self.os_arch == platform_info.os_arch
            else:
                return False
        elif self.action == "disallow":
            if not self.os_constrained or self.os_name == platform_info.os_name:
                return False

        return allowed

    def __repr__(self) -> str:
        if not self.os_constrained:
            return f"<PlatformRule {self.action}>"
        return f"<PlatformRule {self.action} os: {self.os_name}/{self.os_arch}>"


class DependencyEntry:
    """A library declared by a version's metadata.
    """

    __slots__ = "name", "rules", "natives"

    def __init__(self, name: str,
        rules: Optional[List[PlatformRule]] = None,
        natives: Optional[Dict[str, str]] = None
    ) -> None:
        self.name = name
        self.rules = rules
        self.natives = natives

    @classmethod
    def from_dict(cls, value: Any) -> "DependencyEntry":

        if not isinstance(value, dict):
            return cls("")

        name = value.get("name")

        rules = value.get("rules")
        if isinstance(rules, list):
            rules = [PlatformRule.from_dict(rule) for rule in rules]
        else:
            rules = None

        # Old metadata files provides a 'natives' mapping from OS to the classifier
        # specific for this OS.
        natives = value.get("natives")
        if isinstance(natives, dict):
            natives = {k: v for k, v in natives.items() if isinstance(v, str)}
        else:
            natives = None

        return cls(name if isinstance(name, str) else "", rules, natives)

    def __repr__(self) -> str:
        return f"<DependencyEntry {self.name}>"


class VersionManifest:
    """Parsed metadata of a version, only the parts needed to launch are kept.
    """

    __slots__ = "id", "main_class", "assets", "libraries", "legacy_arguments", "game_arguments"

    def __init__(self, id: str, main_class: str, *,
        assets: str = "",
        libraries: Optional[List[DependencyEntry]] = None,
        legacy_arguments: Optional[str] = None,
        game_arguments: Optional[List[Any]] = None
    ) -> None:
        self.id = id
        self.main_class = main_class
        self.assets = assets
        self.libraries = [] if libraries is None else libraries
        self.legacy_arguments = legacy_arguments
        self.game_arguments = game_arguments

    @classmethod
    def from_dict(cls, data: Any, path: Path) -> "VersionManifest":
        """Parse the decoded JSON metadata of a version. The path is only used for
        errors.

        :raises ManifestReadError: If the data is not an object or if the identifier or
        main class are missing.
        """

        if not isinstance(data, dict):
            raise ManifestReadError(path, ManifestReadError.INVALID_FORMAT)

        version_id = data.get("id")
        if not isinstance(version_id, str) or not len(version_id):
            raise ManifestReadError(path, ManifestReadError.MISSING_ID)

        main_class = data.get("mainClass")
        if not isinstance(main_class, str) or not len(main_class):
            raise ManifestReadError(path, ManifestReadError.MISSING_MAIN_CLASS)

        assets = data.get("assets")

        libraries = data.get("libraries")
        if isinstance(libraries, list):
            libraries = [DependencyEntry.from_dict(library) for library in libraries]
        else:
            libraries = None

        legacy_arguments = data.get("minecraftArguments")

        game_arguments = None
        modern_args = data.get("arguments")
        if isinstance(modern_args, dict):
            game_arguments = modern_args.get("game")

        return cls(version_id, main_class,
            assets=assets if isinstance(assets, str) else "",
            libraries=libraries,
            legacy_arguments=legacy_arguments if isinstance(legacy_arguments, str) else None,
            game_arguments=game_arguments if isinstance(game_arguments, list) else None)

    def __repr__(self) -> str:
        return f"<VersionManifest {self.id}>"


class LaunchOptions:
    """Options given by the user for launching the game.

    :param java_path: Path to the java executable, if not set the executable is searched
    in the environment.
    :param memory: Heap size of the JVM in megabytes.
    :param use_system_memory: Don't give any heap size to the JVM, even if `memory` is set.
    """

    def __init__(self,
        java_path: Optional[str] = None,
        memory: Optional[int] = None,
        use_system_memory: bool = False
    ) -> None:
        self.java_path = java_path
        self.memory = memory
        self.use_system_memory = use_system_memory


class RuntimeContext:
    """Values replacing the placeholders of the game's arguments.
    """

    def __init__(self,
        player_name: str,
        version_name: str,
        game_dir: Path,
        assets_dir: Path,
        assets_index_name: str
    ) -> None:
        self.player_name = player_name
        self.version_name = version_name
        self.game_dir = game_dir
        self.assets_dir = assets_dir
        self.assets_index_name = assets_index_name
        self.uuid = OFFLINE_UUID
        self.access_token = OFFLINE_ACCESS_TOKEN
        self.user_type = OFFLINE_USER_TYPE
        self.version_type = VERSION_TYPE

    def replacements(self, quote: bool = True) -> Dict[str, str]:
        """Return the placeholder values. When quoting, values containing spaces that
        must stay a single argument in a command line are surrounded by double quotes.
        """
        version_type = f"\"{self.version_type}\"" if quote else self.version_type
        return {
            "auth_player_name": self.player_name,
            "version_name": self.version_name,
            "game_directory": str(self.game_dir),
            "assets_root": str(self.assets_dir),
            "assets_index_name": self.assets_index_name,
            "auth_uuid": self.uuid,
            "auth_access_token": self.access_token,
            "user_type": self.user_type,
            "version_type": version_type,
        }


class LaunchPlan:
    """Describe the fully resolved command that runs the game. Such instance is produced
    by preparing a version and may be used to run the game. It should not be modified.
    """

    __slots__ = "executable", "jvm_args", "class_path", "main_class", "game_args", "game_argv", "work_dir"

    def __init__(self,
        executable: str,
        jvm_args: List[str],
        class_path: str,
        main_class: str,
        game_args: str,
        work_dir: Optional[Path] = None,
        game_argv: Optional[List[str]] = None
    ) -> None:
        self.executable = executable
        self.jvm_args = tuple(jvm_args)
        self.class_path = class_path
        self.main_class = main_class
        self.game_args = game_args
        self.game_argv = tuple(game_args.split() if game_argv is None else game_argv)
        self.work_dir = work_dir

    def args(self) -> List[str]:
        """Return the command as a list of arguments, each one given as-is to the process,
        so paths containing spaces are kept whole.
        """
        return [self.executable, *self.jvm_args, "-cp", self.class_path, self.main_class, *self.game_argv]

    def command_line(self) -> str:
        """Return the full command line, the class path is quoted as a single argument.
        """

        executable = self.executable
        if " " in executable:
            executable = f"\"{executable}\""

        parts = [executable, *self.jvm_args, "-cp", f"\"{self.class_path}\"", self.main_class]
        if len(self.game_args):
            parts.append(self.game_args)

        return " ".join(parts)

    def run(self, runner: "Optional[Runner]" = None) -> Popen:
        """Run this launch plan, with an optional custom runner.
        """
        return (runner or DetachedRunner()).run(self)

    def __repr__(self) -> str:
        return f"<LaunchPlan {self.main_class}>"


class Runner:
    """Base class handling game running.
    """

    def run(self, plan: LaunchPlan) -> Popen:
        raise NotImplementedError


class DetachedRunner(Runner):
    """Default runner, the game's process is started detached from the current process,
    its output is not read and the runner doesn't wait for it.
    """

    def run(self, plan: LaunchPlan) -> Popen:
        try:
            return self.process_create(plan.args(), plan.work_dir)
        except OSError as error:
            raise SpawnError(plan.executable, error) from error

    def process_create(self, args: List[str], work_dir: Optional[Path]) -> Popen:
        """This function is called when process needs to be created with the given
        arguments in the given working directory.
        """

        if os.name == "nt":
            import subprocess
            flags = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
            return Popen(args, cwd=work_dir, creationflags=flags)
        else:
            return Popen(args, cwd=work_dir, start_new_session=True)


class Version:
    """Class for resolving the launch plan of a version installed in a context. This
    class supports standard versions as installed by the Mojang's launcher.
    """

    def __init__(self, version: str, *,
        context: Optional[Context] = None,
        platform_info: Optional[PlatformInfo] = None
    ) -> None:
        """Construct a standard version launcher.

        :param version: The version to launch, its metadata must be installed.
        :param context: The installation context of the game, used to know where to find
        its metadata and libraries. If the context is not given, the default one is
        constructed (see Context documentation).
        :param platform_info: The platform to resolve rules and natives for, defaults to
        the current platform.
        """

        self.version = version
        self.context = context or Context()
        self.platform_info = platform_info or PlatformInfo.current()

        self.player_name = "Player"
        self.options = LaunchOptions()
        self.path_exists: Callable[[Path], bool] = Path.is_file

    def prepare(self, *, watcher: Optional[Watcher] = None) -> LaunchPlan:
        """Resolve the launch plan of this version, the manifest is read again on each
        call, nothing is kept between calls.

        :raises ManifestReadError: If the version's manifest cannot be read.
        """

        watcher = watcher or Watcher()

        manifest = self._resolve_manifest(watcher)
        class_path = self._resolve_class_path(manifest, watcher)
        runtime = self._resolve_runtime(manifest)

        return assemble_plan(self.context.main_dir, self.version, manifest.main_class,
            class_path, compose_arguments(manifest, runtime), self.options,
            work_dir=self.context.work_dir,
            game_argv=compose_argument_list(manifest, runtime))

    def _resolve_manifest(self, watcher: Watcher) -> VersionManifest:
        manifest = self.context.get_version(self.version).read_manifest()
        watcher.handle(ManifestLoadedEvent(self.version, manifest.main_class))
        return manifest

    def _resolve_class_path(self, manifest: VersionManifest, watcher: Watcher) -> str:
        class_path = build_classpath(self.context, manifest, self.platform_info,
            path_exists=self.path_exists, watcher=watcher)
        return join_classpath(class_path, self.platform_info.classpath_separator)

    def _resolve_runtime(self, manifest: VersionManifest) -> RuntimeContext:
        return RuntimeContext(self.player_name, self.version,
            self.context.work_dir,
            self.context.assets_dir,
            manifest.assets)


class WatcherGroup(Watcher):
    """A watcher forwarding every event to its children, in the order they were added.
    """

    def __init__(self, *children: Watcher) -> None:
        self.children: List[Watcher] = list(children)

    def add(self, watcher: Watcher) -> None:
        """Add a watcher to this group.
        """
        self.children.append(watcher)

    def remove(self, watcher: Watcher) -> None:
        """Remove a watcher from the group.
        """
        self.children.remove(watcher)

    def handle(self, event: Any) -> None:
        for watcher in self.children:
            watcher.handle(event)


class SimpleWatcher(Watcher):

    def __init__(self, handlers: Dict[type, Callable[[Any], None]]) -> None:
        self.handlers = handlers

    def handle(self, event: Any) -> None:
        handler = self.handlers.get(type(event))
        if handler is not None:
            handler(event)


class ManifestReadError(Exception):
    """Raised when a version's manifest cannot be read, the particular reason is given
    as code.
    """

    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"
    INVALID_JSON = "invalid_json"
    INVALID_FORMAT = "invalid_format"
    MISSING_ID = "missing_id"
    MISSING_MAIN_CLASS = "missing_main_class"

    def __init__(self, path: Path, code: str) -> None:
        self.path = path
        self.code = code

    def __str__(self) -> str:
        return repr((str(self.path), self.code))

class DependencyResolutionSkip(Exception):
    """Raised when the file of a library cannot be resolved, this error is not fatal and
    the library is just excluded from the class path.
    """

    INVALID_SPECIFIER = "invalid_specifier"
    NOT_FOUND = "not_found"

    def __init__(self, name: str, code: str) -> None:
        self.name = name
        self.code = code

    def __str__(self) -> str:
        return repr((self.name, self.code))

class SpawnError(Exception):
    """Raised when the game's process cannot be started, the underlying error is given.
    """

    def __init__(self, executable: str, error: Exception) -> None:
        self.executable = executable
        self.error = error

    def __str__(self) -> str:
        return repr((self.executable, str(self.error)))


class ManifestLoadedEvent:
    __slots__ = "version", "main_class"
    def __init__(self, version: str, main_class: str) -> None:
        self.version = version
        self.main_class = main_class

class LibrariesResolvingEvent:
    __slots__ = ()

class LibrarySkippedEvent:
    """Event triggered when a library is excluded from class path because its file
    cannot be resolved.
    """
    __slots__ = "name", "code"
    def __init__(self, name: str, code: str) -> None:
        self.name = name
        self.code = code

class LibrariesResolvedEvent:
    __slots__ = "count", "skipped_count"
    def __init__(self, count: int, skipped_count: int) -> None:
        self.count = count
        self.skipped_count = skipped_count

class ProcessSpawnedEvent:
    __slots__ = "pid",
    def __init__(self, pid: int) -> None:
        self.pid = pid


def read_manifest(path: Path) -> VersionManifest:
    """Read and parse a version's manifest file.

    :raises ManifestReadError: If the file is missing, unreadable or invalid.
    """

    try:
        with path.open("rt", encoding="utf-8") as fp:
            data = json.load(fp)
    except FileNotFoundError as error:
        raise ManifestReadError(path, ManifestReadError.NOT_FOUND) from error
    except (JSONDecodeError, UnicodeDecodeError) as error:
        raise ManifestReadError(path, ManifestReadError.INVALID_JSON) from error
    except OSError as error:
        raise ManifestReadError(path, ManifestReadError.UNREADABLE) from error

    return VersionManifest.from_dict(data, path)


def interpret_rule(rules: Optional[List[PlatformRule]], platform_info: PlatformInfo) -> bool:
    """Interpret rules and determine if the condition is met for the given platform, the
    last rule affecting the decision wins. No rules means always allowed.
    """

    if not rules:
        return True

    return reduce(lambda allowed, rule: rule.apply(allowed, platform_info), rules, True)


def resolve_library_path(context: Context,
    library: DependencyEntry,
    platform_info: PlatformInfo,
    path_exists: Callable[[Path], bool]
) -> Path:
    """Resolve the file of a library, natives for the platform are preferred if they
    exist, the regular JAR file is used otherwise.

    :raises DependencyResolutionSkip: If the specifier is invalid or no file exists.
    """

    try:
        spec = LibrarySpecifier.from_str(library.name)
    except ValueError as error:
        raise DependencyResolutionSkip(library.name, DependencyResolutionSkip.INVALID_SPECIFIER) from error

    if library.natives is not None:
        classifier = library.natives.get(platform_info.os_name)
        if classifier is not None:
            classifier = classifier.replace("${arch}", str(platform_info.arch_bits))
            native_path = context.libraries_dir / spec.with_classifier(classifier).file_path()
            if path_exists(native_path):
                return native_path

    lib_path = context.libraries_dir / spec.file_path()
    if path_exists(lib_path):
        return lib_path

    raise DependencyResolutionSkip(library.name, DependencyResolutionSkip.NOT_FOUND)


def build_classpath(context: Context,
    manifest: VersionManifest,
    platform_info: PlatformInfo, *,
    path_exists: Callable[[Path], bool] = Path.is_file,
    watcher: Optional[Watcher] = None
) -> List[Path]:
    """Build the class path of a version, the version's JAR file is always first and
    then come libraries in the order of the metadata. Libraries excluded by their rules
    are ignored, libraries that cannot be resolved are skipped, this never fails.
    """

    watcher = watcher or Watcher()
    watcher.handle(LibrariesResolvingEvent())

    class_path = [context.get_version(manifest.id).jar_file()]
    skipped_count = 0

    for library in manifest.libraries:

        if not interpret_rule(library.rules, platform_info):
            continue

        try:
            class_path.append(resolve_library_path(context, library, platform_info, path_exists))
        except DependencyResolutionSkip as skip:
            skipped_count += 1
            watcher.handle(LibrarySkippedEvent(skip.name, skip.code))

    watcher.handle(LibrariesResolvedEvent(len(class_path) - 1, skipped_count))
    return class_path


def join_classpath(class_path: List[Path], separator: str = os.pathsep) -> str:
    return separator.join(map(str, class_path))


def compose_arguments(manifest: VersionManifest, runtime: RuntimeContext) -> str:
    """Compose the game's arguments. Both legacy and modern arguments are used if both
    are present, only string tokens of modern arguments are used.
    """

    return replace_vars(_argument_template(manifest), runtime.replacements()).strip()


def compose_argument_list(manifest: VersionManifest, runtime: RuntimeContext) -> List[str]:
    """Compose the game's arguments as a list. The template is split on whitespace before
    placeholders are replaced, so a value containing spaces stays a single argument.
    """

    replacements = runtime.replacements(quote=False)
    return [replace_vars(arg, replacements) for arg in _argument_template(manifest).split()]


def _argument_template(manifest: VersionManifest) -> str:

    args = manifest.legacy_arguments or ""

    if manifest.game_arguments is not None:
        for arg in manifest.game_arguments:
            if isinstance(arg, str):
                args += " " + arg

    return args


def fixed_jvm_args(main_dir: Path, version_name: str) -> List[str]:
    """Return the JVM arguments that are always given to the game.
    """

    version_dir = main_dir / "versions" / version_name
    natives_dir = version_dir / NATIVES_DIR_NAME

    return [
        "-Dfile.encoding=GB18030",
        "-Dsun.stdout.encoding=GB18030",
        "-Dsun.stderr.encoding=GB18030",
        "-Djava.rmi.server.useCodebaseOnly=true",
        "-Dcom.sun.jndi.rmi.object.trustURLCodebase=false",
        "-Dcom.sun.jndi.cosnaming.object.trustURLCodebase=false",
        "-Dlog4j2.formatMsgNoLookups=true",
        f"-Dlog4j.configurationFile={version_dir / 'log4j2.xml'}",
        f"-Dminecraft.client.jar={version_dir / f'{version_name}.jar'}",
        "-XX:+UnlockExperimentalVMOptions",
        "-XX:+UseG1GC",
        "-XX:G1NewSizePercent=20",
        "-XX:G1ReservePercent=20",
        "-XX:MaxGCPauseMillis=50",
        "-XX:G1HeapRegionSize=32m",
        "-XX:-UseAdaptiveSizePolicy",
        "-XX:-OmitStackTraceInFastThrow",
        "-XX:-DontCompileHugeMethods",
        "-Dfml.ignoreInvalidMinecraftCertificates=true",
        "-Dfml.ignorePatchDiscrepancies=true",
        "-XX:HeapDumpPath=MojangTricksIntelDriversForPerformance_javaw.exe_minecraft.exe.heapdump",
        f"-Djava.library.path={natives_dir}",
        f"-Djna.tmpdir={natives_dir}",
        f"-Dorg.lwjgl.system.SharedLibraryExtractPath={natives_dir}",
        f"-Dio.netty.native.workdir={natives_dir}",
        f"-Dminecraft.launcher.brand={LAUNCHER_NAME}",
        f"-Dminecraft.launcher.version={LAUNCHER_VERSION}",
    ]


def assemble_plan(main_dir: Path,
    version_name: str,
    main_class: str,
    class_path: str,
    game_args: str,
    options: LaunchOptions, *,
    work_dir: Optional[Path] = None,
    game_argv: Optional[List[str]] = None
) -> LaunchPlan:
    """Assemble the launch plan from its resolved parts and the user's options. The game's
    arguments are given as a string for display and optionally as a list for spawning,
    the list defaults to the string split on whitespace.
    """

    jvm_args = []

    if not options.use_system_memory and options.memory is not None:
        jvm_args.append(f"-Xmx{options.memory}M")
        jvm_args.append(f"-Xms{options.memory}M")

    jvm_args.extend(fixed_jvm_args(main_dir, version_name))

    return LaunchPlan(options.java_path or jvm_bin_filename, jvm_args, class_path,
        main_class, game_args, work_dir, game_argv)


def launch(main_dir: Optional[Path],
    version_name: str,
    player_name: str,
    options: Optional[LaunchOptions] = None, *,
    platform_info: Optional[PlatformInfo] = None,
    runner: Optional[Runner] = None,
    watcher: Optional[Watcher] = None
) -> Popen:
    """Launch an installed version and return the handle of the game's process.

    :raises ManifestReadError: If the version's manifest cannot be read.
    :raises SpawnError: If the game's process cannot be started.
    """

    watcher = watcher or Watcher()

    version = Version(version_name, context=Context(main_dir), platform_info=platform_info)
    version.player_name = player_name
    if options is not None:
        version.options = options

    process = version.prepare(watcher=watcher).run(runner)
    watcher.handle(ProcessSpawnedEvent(process.pid))
    return process


def get_minecraft_dir() -> Path:
    """Internal function to get the default directory for installing
    and running Minecraft.
    """
    home = Path.home()
    return {
        "Windows": home.joinpath("AppData", "Roaming", ".minecraft"),
        "Darwin": home.joinpath("Library", "Application Support", "minecraft"),
    }.get(platform.system(), home / ".minecraft")


# Name of the OS has used by Minecraft.
minecraft_os = {
    "Linux": "linux",
    "Windows": "windows",
    "Darwin": "osx",
    "FreeBSD": "freebsd"
}.get(platform.system())

# Name of the processor's architecture has used by Minecraft.
minecraft_arch = {
    "i386": "x86",
    "i686": "x86",
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "arm64": "arm64",
    "aarch64": "arm64",
    "armv7l": "arm32",
    "armv6l": "arm32",
}.get(platform.machine().lower())

# Stores the bits length of pointers on the current system.
minecraft_arch_bits = {
    "64bit": 64,
    "32bit": 32
}.get(platform.architecture()[0])
