"""Tests of the class path resolution from version's libraries.
"""

from wmml.standard import Context, VersionManifest, DependencyEntry, PlatformInfo, \
    DependencyResolutionSkip, LibrarySkippedEvent, LibrariesResolvedEvent, Watcher, \
    build_classpath, join_classpath

from typing import Any, List


WINDOWS = PlatformInfo("windows", "x86_64")
WINDOWS_X86 = PlatformInfo("windows", "x86")
LINUX = PlatformInfo("linux", "x86_64")


class RecordWatcher(Watcher):

    def __init__(self) -> None:
        self.events: List[Any] = []

    def handle(self, event: Any) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> list:
        return [event for event in self.events if isinstance(event, event_type)]


def _manifest(*libraries) -> VersionManifest:
    return VersionManifest("1.12.2", "net.minecraft.client.main.Main",
        libraries=[DependencyEntry.from_dict(library) for library in libraries])


def test_version_jar_first(tmp_context: Context, install_library):

    install_library("com/mojang/patchy/1.1/patchy-1.1.jar")

    manifest = _manifest({"name": "com.mojang:patchy:1.1"})
    class_path = build_classpath(tmp_context, manifest, WINDOWS)

    # The version's JAR is always first, even if not installed.
    assert class_path == [
        tmp_context.versions_dir / "1.12.2" / "1.12.2.jar",
        tmp_context.libraries_dir / "com/mojang/patchy/1.1/patchy-1.1.jar",
    ]

    class_path = build_classpath(tmp_context, _manifest(), WINDOWS)
    assert class_path == [tmp_context.versions_dir / "1.12.2" / "1.12.2.jar"]


def test_metadata_order(tmp_context: Context, install_library):

    b = install_library("foo/b/1.0/b-1.0.jar")
    a = install_library("foo/a/1.0/a-1.0.jar")

    manifest = _manifest({"name": "foo:b:1.0"}, {"name": "foo:a:1.0"}, {"name": "foo:b:1.0"})
    class_path = build_classpath(tmp_context, manifest, WINDOWS)

    # Duplicates are kept as given by the metadata.
    assert class_path[1:] == [b, a, b]


def test_rules(tmp_context: Context, install_library):

    lib = install_library("foo/windows-only/1.0/windows-only-1.0.jar")
    manifest = _manifest({
        "name": "foo:windows-only:1.0",
        "rules": [{"action": "allow", "os": {"name": "windows"}}]
    })

    assert build_classpath(tmp_context, manifest, WINDOWS)[1:] == [lib]
    assert build_classpath(tmp_context, manifest, LINUX)[1:] == []


def test_missing_library(tmp_context: Context, install_library):

    present = install_library("foo/present/1.0/present-1.0.jar")
    manifest = _manifest({"name": "foo:missing:1.0"}, {"name": "foo:present:1.0"})

    watcher = RecordWatcher()
    class_path = build_classpath(tmp_context, manifest, WINDOWS, watcher=watcher)

    assert class_path[1:] == [present]

    skipped = watcher.of_type(LibrarySkippedEvent)
    assert len(skipped) == 1
    assert skipped[0].name == "foo:missing:1.0"
    assert skipped[0].code == DependencyResolutionSkip.NOT_FOUND

    resolved = watcher.of_type(LibrariesResolvedEvent)
    assert len(resolved) == 1
    assert resolved[0].count == 1
    assert resolved[0].skipped_count == 1


def test_invalid_specifier(tmp_context: Context, install_library):

    present = install_library("foo/present/1.0/present-1.0.jar")
    manifest = _manifest({"name": "foo:broken"}, {"version": "1.0"}, "garbage", {"name": "foo:present:1.0"})

    watcher = RecordWatcher()
    class_path = build_classpath(tmp_context, manifest, WINDOWS, watcher=watcher)

    # Invalid entries don't abort the whole build.
    assert class_path[1:] == [present]

    skipped = watcher.of_type(LibrarySkippedEvent)
    assert [event.name for event in skipped] == ["foo:broken", "", ""]
    assert all(event.code == DependencyResolutionSkip.INVALID_SPECIFIER for event in skipped)


def test_classifier_segment(tmp_context: Context, install_library):

    # Modern metadata declare natives as separate libraries with a classifier.
    natives = install_library("org/lwjgl/lwjgl/3.3.1/lwjgl-3.3.1-natives-windows.jar")
    regular = install_library("org/lwjgl/lwjgl/3.3.1/lwjgl-3.3.1.jar")

    manifest = _manifest({"name": "org.lwjgl:lwjgl:3.3.1"}, {"name": "org.lwjgl:lwjgl:3.3.1:natives-windows"})

    watcher = RecordWatcher()
    assert build_classpath(tmp_context, manifest, WINDOWS, watcher=watcher)[1:] == [regular, natives]
    assert watcher.of_type(LibrarySkippedEvent) == []

    # The classifier is part of the file name, a missing file is skipped as not found.
    manifest = _manifest({"name": "org.lwjgl:lwjgl:3.3.1:natives-linux"})
    watcher = RecordWatcher()
    assert build_classpath(tmp_context, manifest, WINDOWS, watcher=watcher)[1:] == []
    assert [event.code for event in watcher.of_type(LibrarySkippedEvent)] == [DependencyResolutionSkip.NOT_FOUND]


def test_natives(tmp_context: Context, install_library):

    native64 = install_library("org/lwjgl/lwjgl/lwjgl-platform/2.9.4/lwjgl-platform-2.9.4-natives-windows-64.jar")
    regular = install_library("org/lwjgl/lwjgl/lwjgl-platform/2.9.4/lwjgl-platform-2.9.4.jar")

    manifest = _manifest({
        "name": "org.lwjgl.lwjgl:lwjgl-platform:2.9.4",
        "natives": {"windows": "natives-windows-${arch}", "linux": "natives-linux"}
    })

    # Natives are used if installed.
    assert build_classpath(tmp_context, manifest, WINDOWS)[1:] == [native64]

    # Natives for 32 bits are not installed, fallback to regular JAR.
    assert build_classpath(tmp_context, manifest, WINDOWS_X86)[1:] == [regular]

    # Linux natives are not installed, fallback to regular JAR.
    assert build_classpath(tmp_context, manifest, LINUX)[1:] == [regular]


def test_natives_missing(tmp_context: Context):

    manifest = _manifest({
        "name": "org.lwjgl.lwjgl:lwjgl-platform:2.9.4",
        "natives": {"windows": "natives-windows-${arch}"}
    })

    watcher = RecordWatcher()
    assert build_classpath(tmp_context, manifest, WINDOWS, watcher=watcher)[1:] == []
    assert [event.code for event in watcher.of_type(LibrarySkippedEvent)] == [DependencyResolutionSkip.NOT_FOUND]


def test_path_exists(tmp_context: Context):

    checked = []
    def path_exists(path) -> bool:
        checked.append(path)
        return True

    manifest = _manifest({
        "name": "org.lwjgl.lwjgl:lwjgl-platform:2.9.4",
        "natives": {"windows": "natives-windows-${arch}"}
    }, {"name": "foo:bar:1.0"})

    class_path = build_classpath(tmp_context, manifest, WINDOWS_X86, path_exists=path_exists)

    assert class_path[1:] == checked == [
        tmp_context.libraries_dir / "org/lwjgl/lwjgl/lwjgl-platform/2.9.4/lwjgl-platform-2.9.4-natives-windows-32.jar",
        tmp_context.libraries_dir / "foo/bar/1.0/bar-1.0.jar",
    ]


def test_join_classpath(tmp_path):

    paths = [tmp_path / "a.jar", tmp_path / "b.jar"]

    assert join_classpath(paths, ";") == f"{paths[0]};{paths[1]}"
    assert join_classpath(paths, ":") == f"{paths[0]}:{paths[1]}"
    assert join_classpath([]) == ""
