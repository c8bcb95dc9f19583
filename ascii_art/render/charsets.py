from types import MappingProxyType
from typing import List, Mapping

from ascii_art.config import DEFAULT_RAMP

# Ordered darkest -> lightest. Index 0 is used for the darkest patches.
GLYPH_RAMPS: Mapping[str, str] = MappingProxyType({
    "minimal":       "@%#*+=-:. ",
    "simple":        "@#S%?*+;:,. ",
    "detailed":      "█▉▊▋▌▍▎▏▎▍▌▋▊▉█■▪▫▬▭▮▯▰▱@#S%?*+;:,. ",
    "blocks":        "█▓▒░ ",
    "comprehensive": "██▓▒░@#%&*+=<>?/\\|}{[]()^~`\"';:,._-    ",
})

RAMP_LABELS: Mapping[str, str] = MappingProxyType({
    "minimal": "Minimal",
    "simple": "Simple",
    "detailed": "Detailed",
    "blocks": "Blocks",
    "comprehensive": "Comprehensive",
})


def ramp_names() -> List[str]:
    return list(GLYPH_RAMPS)


def get_ramp(name: str = DEFAULT_RAMP) -> str:
    try:
        return GLYPH_RAMPS[name]
    except KeyError:
        raise KeyError(f"Unknown ramp {name!r}; expected one of: {', '.join(GLYPH_RAMPS)}") from None
