import json


def export_json(palette, filepath, source_file=None):
    """Export palette colors, names and rule as JSON.

    Args:
        palette: The Palette to write
        filepath: Output file path
        source_file: Source image filename for metadata
    """
    data = palette.to_dict()

    data["_note"] = "colors are #RRGGBB; names are nearest dictionary matches"

    if source_file:
        data["_source"] = source_file

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
