from ..color import rgb_to_hsl


def print_palette(palette):
    """Print palette info"""
    heading = palette.label or "Extracted"

    print("\n" + "=" * 60)
    print(f"COLOR PALETTE ({heading.upper()})")
    print("=" * 60)

    for color, hex_code, name in zip(palette.colors, palette.hex_codes, palette.names):
        h, s, l = rgb_to_hsl(color)
        print(f"  {hex_code}  {name:24} (H: {h:5.1f}  S: {s:5.1f}%  L: {l:5.1f}%)")
