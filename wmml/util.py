"""Global utilities used internally. The functions can be used externally but upward
compatibility is not guaranteed unless explicitly specified.
"""

import platform

from typing import Optional, Dict


jvm_bin_filename = "javaw.exe" if platform.system() == "Windows" else "java"


def replace_vars(text: str, replacements: Dict[str, str]) -> str:
    """Replace all variables of the form `${foo}` in a string. This is a literal replace
    of every known variable, unknown variables are kept verbatim.
    """
    for key, value in replacements.items():
        text = text.replace(f"${{{key}}}", value)
    return text


class LibrarySpecifier:
    """A maven-style library specifier.
    """

    __slots__ = "group", "artifact", "version", "classifier", "extension"

    def __init__(self, group: str, artifact: str, version: str, classifier: Optional[str] = None, extension: str = "jar"):
        self.group = group
        self.artifact = artifact
        self.version = version
        self.classifier = classifier
        self.extension = extension

    @classmethod
    def from_str(cls, s: str) -> "LibrarySpecifier":
        """Parse a library specifier string 'group:artifact:version[:classifier]'.
        """

        ext_split = s.rsplit("@", maxsplit=1)
        ext = "jar" if len(ext_split) == 1 else ext_split[1]

        if not len(ext):
            raise ValueError("invalid library specifier: empty extension")

        parts = ext_split[0].split(":", 3)

        if len(parts) < 3:
            raise ValueError("invalid library specifier: too few parts")
        elif not all(parts[:3]):
            raise ValueError("invalid library specifier: empty part")
        else:
            return LibrarySpecifier(parts[0], parts[1], parts[2], parts[3] if len(parts) == 4 else None, ext)

    def with_classifier(self, classifier: Optional[str]) -> "LibrarySpecifier":
        """Return a copy of this specifier with another classifier.
        """
        return LibrarySpecifier(self.group, self.artifact, self.version, classifier, self.extension)

    def __str__(self) -> str:
        return f"{self.group}:{self.artifact}:{self.version}" + \
            ("" if self.classifier is None else f":{self.classifier}") + \
            ("" if self.extension == "jar" else f"@{self.extension}")

    def __eq__(self, other) -> bool:
        return isinstance(other, LibrarySpecifier) and \
            (self.group, self.artifact, self.version, self.classifier, self.extension) == \
            (other.group, other.artifact, other.version, other.classifier, other.extension)

    def __repr__(self) -> str:
        return f"<LibrarySpecifier {self}>"

    def __hash__(self) -> int:
        return hash((self.group, self.artifact, self.version, self.classifier, self.extension))

    def file_path(self) -> str:
        """Return the standard path to store the file of this specifier.

        The path separator will always be forward slashes '/', because it's compatible
        with linux/mac/windows and URL paths.

        Specifier `com.foo.bar:artifact:version@zip` gives
        `com/foo/bar/artifact/version/artifact-version.zip`.
        """

        file_name = f"{self.artifact}-{self.version}" + \
            ("" if self.classifier is None else f"-{self.classifier}") + \
            f".{self.extension}"

        return "/".join([*self.group.split("."), self.artifact, self.version, file_name])
