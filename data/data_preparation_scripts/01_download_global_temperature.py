#!/usr/bin/env python3
"""
Download the global monthly temperature variance JSON to a local snapshot.

The snapshot has the same shape as the remote file and can be passed to
02_export_heatmap_html.py with --input for offline rendering.

Example (after `pip install -e .` at the repository root):
  python data/data_preparation_scripts/01_download_global_temperature.py --out data/global-temperature.json
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import requests

from libs.fn__libs import DATASET_URL, DataLoadError, f103__load_dataset_file, f106__dataset_summary


def download_file(url: str, out_path: Path, overwrite: bool = False) -> bool:
    """Stream `url` to `out_path` through a .part file. Returns False when skipped."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if out_path.exists() and not overwrite:
        return False

    with requests.get(url, stream=True, timeout=120) as r:
        r.raise_for_status()
        tmp = out_path.with_suffix(out_path.suffix + ".part")
        with tmp.open("wb") as f:
            for chunk in r.iter_content(chunk_size=1024 * 1024):
                if chunk:
                    f.write(chunk)
        tmp.replace(out_path)
    return True


def main() -> None:
    p = argparse.ArgumentParser(description="Download the global monthly temperature variance dataset.")
    p.add_argument("--out", required=True, help="Output JSON path.")
    p.add_argument("--url", default=DATASET_URL, help="Dataset URL (default: freeCodeCamp reference data).")
    p.add_argument("--overwrite", action="store_true", help="Overwrite an existing snapshot.")
    args = p.parse_args()

    out_path = Path(args.out).expanduser().resolve()

    print(f"Downloading: {args.url}")
    try:
        written = download_file(args.url, out_path, overwrite=args.overwrite)
    except requests.RequestException as e:
        print(f"❌ Download failed: {e}")
        sys.exit(1)
    if not written:
        print(f"Snapshot already present (use --overwrite to replace): {out_path}")

    # Check the snapshot parses before declaring success
    try:
        dataset = f103__load_dataset_file(out_path)
    except DataLoadError as e:
        print(f"❌ Snapshot is not a valid dataset: {e}")
        sys.exit(1)

    summary = f106__dataset_summary(dataset)
    print(f"✅ Saved: {out_path}")
    print(f"  records: {summary['records']:,}")
    print(f"  years: {summary['first_year']}–{summary['last_year']}")
    print(f"  base temperature: {summary['base_temperature']}")


if __name__ == "__main__":
    main()
