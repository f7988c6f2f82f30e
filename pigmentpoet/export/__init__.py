from .json_export import export_json
from .report import print_palette

__all__ = ["export_json", "print_palette"]
