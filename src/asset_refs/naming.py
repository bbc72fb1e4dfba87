"""Turn asset file names into Dart constant identifiers.

The result is not checked for Dart legality: a file named ``1.png`` yields
the identifier ``1``, which the Dart analyzer will reject. Callers that care
should rename the asset.
"""

import unicodedata


def name_stem(file_name: str) -> str:
    """Return the file name up to its first dot (``icon.dark.png`` -> ``icon``)."""
    return file_name.split(".")[0]


def disambiguated_stem(prefix: str, stem: str) -> str:
    """Prefix a colliding stem with its directory path, ``assets/icons`` + ``a`` -> ``assets_icons_a``."""
    stem = stem.strip().replace(" ", "_")
    path_prefix = prefix.strip("/").replace(" ", "_").replace("/", "_")
    return f"{path_prefix}_{stem}"


def strip_diacritics(name: str) -> str:
    """Fold accented characters to their base letter."""
    decomposed = unicodedata.normalize("NFD", name)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", folded)


def to_identifier(name: str) -> str:
    """Apply the hyphen and diacritic rules to a resolved stem."""
    return strip_diacritics(name.replace("-", "_"))
