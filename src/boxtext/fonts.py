"""Font registration and face resolution."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

FONT_SUFFIXES = (".ttf", ".otf")

# Font path registry: maps registered font names to their file paths
_FONT_PATHS: dict[str, Path] = {}


def _normalize_font_name(name: str) -> str:
    """
    Normalize a font name to TitleCase convention.

    Converts hyphen-separated parts to Title Case to match PostScript naming.

    Examples:
        "roboto-regular" → "Roboto-Regular"
        "dejavusans-bold" → "Dejavusans-Bold"

    Args:
        name: Font name to normalize (can be any case)

    Returns:
        TitleCase font name
    """
    parts = name.split('-')
    return '-'.join(part.title() for part in parts)


def register_font(name: str, path: Path | str) -> str:
    """
    Register a single font file under a name.

    Args:
        name: Font name, case-insensitive.
        path: Path to the font file.

    Returns:
        The normalized name the font was registered under.

    Raises:
        FileNotFoundError: If the font file doesn't exist.
    """
    font_path = Path(path)
    if not font_path.is_file():
        raise FileNotFoundError(f"Font file not found: {font_path}")

    font_name = _normalize_font_name(name)
    _FONT_PATHS[font_name] = font_path
    logger.info(f"Registered font: {font_name} from {font_path.name}")
    return font_name


def register_fonts(fonts_dir: Path) -> list[str]:
    """
    Register every font file in a directory.

    Each font is registered with a TitleCase name based on its filename
    (without extension), e.g. ``roboto-regular.ttf`` becomes "Roboto-Regular".

    Args:
        fonts_dir: Directory to scan (not recursive).

    Returns:
        Names of the registered fonts, in filename order.
    """
    font_files = sorted(p for p in fonts_dir.glob("*") if p.suffix.lower() in FONT_SUFFIXES)

    if not font_files:
        logger.warning(f"No font files found in {fonts_dir}")
        return []

    registered = [register_font(font_path.stem, font_path) for font_path in font_files]
    logger.info(f"Successfully registered {len(registered)} font(s) from {fonts_dir}")
    return registered


def get_font_path(font_name: str) -> Path | None:
    """
    Get the file path for a registered font.

    Args:
        font_name: Registered font name, case-insensitive.

    Returns:
        Path to the font file, or None if the name is not registered.
    """
    return _FONT_PATHS.get(_normalize_font_name(font_name))


def resolve_font_path(face: str) -> Path:
    """
    Resolve a font face to a font file.

    Resolution priority:
    1. Registered font name
    2. Existing file path

    Args:
        face: Registered font name or path to a font file.

    Returns:
        Path to the font file.

    Raises:
        FileNotFoundError: If the face is neither registered nor an existing file.
    """
    if font_path := get_font_path(face):
        return font_path

    font_path = Path(face)
    if font_path.is_file():
        return font_path

    raise FileNotFoundError(f"Font '{face}' is not registered and is not a font file")
