"""Generate calculator settings fixtures."""

import json
from pathlib import Path

from easel.catalog import DEFAULT_PRESETS


def generate_preset_settings() -> None:
    """Generate preset_8x10.json from the built-in 35mm preset."""
    output_path = Path(__file__).parent / "preset_8x10.json"
    output_path.write_text(json.dumps(DEFAULT_PRESETS["35mm-on-8x10"], indent=2) + "\n")
    print(f"✓ Generated {output_path}")


def generate_offset_settings() -> None:
    """Generate offset_5x7.json: 4:3 on 5x7 with the print pushed down."""
    settings = {
        **DEFAULT_PRESETS["35mm-on-8x10"],
        "paperSize": "5x7",
        "aspectRatio": "4:3",
        "minBorder": 0.25,
        "enableOffset": True,
        "verticalOffset": 2,
    }
    output_path = Path(__file__).parent / "offset_5x7.json"
    output_path.write_text(json.dumps(settings, indent=2) + "\n")
    print(f"✓ Generated {output_path}")


if __name__ == "__main__":
    generate_preset_settings()
    generate_offset_settings()
