import pytest


def test_replace_vars():

    from wmml.util import replace_vars

    assert replace_vars("this is foo value: ${foo}", {"foo": "89658"}) == "this is foo value: 89658"
    assert replace_vars("${foo}/${foo}", {"foo": "a"}) == "a/a"
    assert replace_vars("both values: ${foo}/${bar}...", {"foo": "89658", "bar": "test"}) == "both values: 89658/test..."
    assert replace_vars("known ${foo} and unknown ${unknown}", {"foo": "1"}) == "known 1 and unknown ${unknown}"
    assert replace_vars("no braces $foo {foo}", {"foo": "1"}) == "no braces $foo {foo}"


def test_library_specifier():

    from wmml.util import LibrarySpecifier

    with pytest.raises(ValueError):
        LibrarySpecifier.from_str("foo.bar:baz")

    with pytest.raises(ValueError):
        LibrarySpecifier.from_str("foo.bar::0.1.0")

    with pytest.raises(ValueError):
        LibrarySpecifier.from_str("foo.bar:baz:0.1.0@")

    spec = LibrarySpecifier.from_str("foo.bar:baz:0.1.0")
    assert spec.group == "foo.bar"
    assert spec.artifact == "baz"
    assert spec.version == "0.1.0"
    assert spec.classifier is None
    assert str(spec) == "foo.bar:baz:0.1.0"
    assert spec.file_path() == "foo/bar/baz/0.1.0/baz-0.1.0.jar"

    spec = LibrarySpecifier.from_str("foo.bar:baz:0.1.0:natives-windows")
    assert spec.classifier == "natives-windows"
    assert spec.file_path() == "foo/bar/baz/0.1.0/baz-0.1.0-natives-windows.jar"

    spec = LibrarySpecifier.from_str("foo.bar:baz:0.1.0:classifier@txt")
    assert spec.extension == "txt"
    assert str(spec) == "foo.bar:baz:0.1.0:classifier@txt"
    assert spec.file_path() == "foo/bar/baz/0.1.0/baz-0.1.0-classifier.txt"


def test_library_specifier_with_classifier():

    from wmml.util import LibrarySpecifier

    spec = LibrarySpecifier.from_str("org.lwjgl.lwjgl:lwjgl-platform:2.9.4")
    native_spec = spec.with_classifier("natives-windows")

    assert spec.classifier is None
    assert native_spec == LibrarySpecifier("org.lwjgl.lwjgl", "lwjgl-platform", "2.9.4", "natives-windows")
    assert native_spec.file_path() == "org/lwjgl/lwjgl/lwjgl-platform/2.9.4/lwjgl-platform-2.9.4-natives-windows.jar"
