import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import argparse, logging, cv2
from sdfkit.grid import BinaryMask
from sdfkit.distance import build_signed_field
from sdfkit.visualize import colorize_field
from sdfkit.log import configure_logging

def main():
    ap = argparse.ArgumentParser(description='Build an 8-bit signed distance field from a binary mask image.')
    ap.add_argument('--image', required=True, help='input mask image path')
    ap.add_argument('--out', required=True, help='output field path (e.g., glyph.sdf.png)')
    ap.add_argument('--threshold', type=int, default=127, help='pixels brighter than this are foreground')
    ap.add_argument('--symmetric', action='store_true', help='seed exterior boundary pixels too')
    ap.add_argument('--cover-edges', action='store_true', help='propagate into the outer rows/columns as well')
    ap.add_argument('--quantize', action='store_true', help='8-bit intermediate distances (reference output)')
    ap.add_argument('--preview', action='store_true', help='also write a colorized preview')
    ap.add_argument('--verbose', action='store_true')
    args = ap.parse_args()

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        mask = BinaryMask.load(args.image, threshold=args.threshold)
    except FileNotFoundError:
        raise SystemExit(f'Cannot read {args.image}')

    field = build_signed_field(mask, symmetric=args.symmetric,
                               cover_edges=args.cover_edges, quantize=args.quantize)
    field.save(args.out)
    msg = f'[OK] field saved → {args.out} ({field.width()}x{field.height()})'
    if args.preview:
        root, _ = os.path.splitext(args.out)
        prev = root + '_preview.png'
        cv2.imwrite(prev, colorize_field(field))
        msg += f'\nPreview → {prev}'
    print(msg)

if __name__ == '__main__':
    main()
