#!/usr/bin/env python3
"""
Render the variance heatmap to a standalone HTML page.

Reads the remote dataset (default) or a local snapshot (--input). When the
data cannot be loaded an error placeholder page is written instead and the
script exits with status 1.

Examples (after `pip install -e .` at the repository root):
  python data/data_preparation_scripts/02_export_heatmap_html.py --out heatmap.html
  python data/data_preparation_scripts/02_export_heatmap_html.py --input data/global-temperature.json --out heatmap.html --width 1600
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from libs.fn__libs import DATASET_URL, DataLoadError, f101__fetch_dataset, f103__load_dataset_file
from libs.fn__libs_charts import f204__build_heatmap_scene, f206__heatmap_page_html, f207__error_placeholder_html
from libs.fn__scales import ChartConfig


def main() -> None:
    ap = argparse.ArgumentParser(description="Export the global temperature variance heatmap as standalone HTML.")
    ap.add_argument("--out", required=True, help="Output HTML path.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--input", type=str, default=None, help="Local JSON snapshot (from 01_download_global_temperature.py).")
    src.add_argument("--url", type=str, default=DATASET_URL, help="Dataset URL (default: freeCodeCamp reference data).")
    ap.add_argument("--width", type=int, default=ChartConfig.width, help="Inner chart width in px (default: 1200).")
    ap.add_argument("--height", type=int, default=ChartConfig.height, help="Inner chart height in px (default: 400).")
    ap.add_argument("--ticks", type=int, default=ChartConfig.x_tick_count, help="Approximate year tick count (default: 20).")
    ap.add_argument("--verbose", action="store_true", help="Verbose logging.")
    args = ap.parse_args()

    out_path = Path(args.out).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        if args.input:
            if args.verbose:
                print(f"Reading snapshot: {args.input}")
            dataset = f103__load_dataset_file(Path(args.input))
        else:
            if args.verbose:
                print(f"Fetching: {args.url}")
            dataset = f101__fetch_dataset(args.url)
    except DataLoadError as e:
        out_path.write_text(f207__error_placeholder_html(str(e)), encoding="utf-8")
        print(f"❌ {e}")
        print(f"   Placeholder page written to {out_path}")
        sys.exit(1)

    config = ChartConfig(width=args.width, height=args.height, x_tick_count=args.ticks)
    scene = f204__build_heatmap_scene(dataset, config)

    if args.verbose:
        print(f"Records: {len(dataset):,}")
        print(f"Cells: {len(scene.cells):,}")
        print(f"Year ticks: {', '.join(scene.x_axis.labels)}")
        print(f"Legend: {', '.join(scene.legend_axis.labels)}")

    out_path.write_text(f206__heatmap_page_html(scene), encoding="utf-8")
    print(f"✅ Written: {out_path}")


if __name__ == "__main__":
    main()
