"""
File format categories understood by kpsewhich.

Values are passed verbatim as ``--format=<value>``; they must match the
names kpsewhich prints for ``kpsewhich --help-formats``.
"""

from __future__ import annotations

from enum import Enum

from pykpathsea.exceptions import InvalidArgumentError


class FileFormat(str, Enum):
    """Format filter for a kpsewhich lookup."""

    # Font formats
    TFM = "tfm"
    VF = "vf"
    PK = "pk"
    TYPE1 = "type1 fonts"
    TRUETYPE = "truetype fonts"
    OPENTYPE = "opentype fonts"

    # TeX source and style formats
    TEX = "tex"
    BIB = "bib"
    BST = "bst"
    CLS = "cls"
    STY = "sty"

    # Configuration and mapping formats
    CNF = "cnf"
    MAP = "map"
    ENC = "enc"

    # Let kpsewhich search every format it knows (no --format flag)
    ALL = "all"

    def __str__(self) -> str:
        return self.value

    @property
    def flag(self) -> str | None:
        """Command-line flag for this format, or None for ALL."""
        if self is FileFormat.ALL:
            return None
        return f"--format={self.value}"

    @classmethod
    def parse(cls, value: FileFormat | str) -> FileFormat:
        """Resolve a member, member name or literal value to a FileFormat.

        Args:
            value: e.g. ``FileFormat.TFM``, ``"TFM"``, ``"tfm"`` or
                ``"truetype fonts"``.

        Raises:
            InvalidArgumentError: If the value is not a known format.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            for member in cls:
                if text == member.value or text.upper() == member.name:
                    return member
        known = ", ".join(member.name.lower() for member in cls)
        raise InvalidArgumentError(
            f"Unknown file format {value!r} (expected one of: {known})"
        )
