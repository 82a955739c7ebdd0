"""
Batch analyzer for plain-text files.
Computes the full metrics of every .txt file in a directory and writes one
JSON file per input.
"""

import sys
import os
import json
import argparse
from typing import Optional
from tqdm import tqdm

# Add project root to path (go up from scripts/ to root)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, PROJECT_ROOT)

from texttools.services.stats_service import compute_metrics  # noqa: E402

DATA_DIR = os.path.join(PROJECT_ROOT, "data")
RAW_DIR = os.path.join(DATA_DIR, "raw_texts")
OUTPUT_DIR = os.path.join(DATA_DIR, "analyzed_stats")


def analyze_file(input_path: str, output_path: str) -> Optional[dict]:
    """Analyzes a single text file and saves its metrics to JSON.

    Args:
        input_path (str): Path to the .txt file.
        output_path (str): Where to write the metrics JSON.

    Returns:
        Optional[dict]: The metrics that were written, or None if the file
            could not be read.
    """
    try:
        with open(input_path, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {input_path}: {e}")
        return None

    stats = compute_metrics(text).model_dump(mode="json")
    stats["_meta"] = {"filename": os.path.basename(input_path)}

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(stats, f, ensure_ascii=False, indent=2)

    return stats


def process_directory(input_dir: str, output_dir: str, force: bool = False) -> dict:
    """Analyzes every .txt file in a directory.

    Args:
        input_dir (str): Directory with the raw text files.
        output_dir (str): Directory for the JSON results.
        force (bool): If True, overwrites existing results.

    Returns:
        dict: Counts of processed, skipped and failed files.
    """
    os.makedirs(output_dir, exist_ok=True)

    files = sorted(f for f in os.listdir(input_dir) if f.endswith(".txt"))
    summary = {"processed": 0, "skipped": 0, "errors": 0}

    for file in tqdm(files, desc="Analyzing texts"):
        basename = os.path.splitext(file)[0]
        output_path = os.path.join(output_dir, f"{basename}.json")

        # Skip if already exists and force is False
        if os.path.exists(output_path) and not force:
            summary["skipped"] += 1
            continue

        if analyze_file(os.path.join(input_dir, file), output_path) is None:
            summary["errors"] += 1
        else:
            summary["processed"] += 1

    return summary


def main():
    """Main entry point for generating stats."""
    parser = argparse.ArgumentParser(description="Generate JSON stats from text files")
    parser.add_argument("--input", default=RAW_DIR, help="Directory of .txt files")
    parser.add_argument("--output", default=OUTPUT_DIR, help="Directory for JSON stats")
    parser.add_argument("--force", action="store_true", help="Overwrite existing stats")
    args = parser.parse_args()

    if not os.path.isdir(args.input):
        print(f"No raw texts found at: {args.input}")
        print("Please create the directory and add .txt files.")
        return

    summary = process_directory(args.input, args.output, force=args.force)
    print(
        f"Done. Processed: {summary['processed']}, "
        f"Skipped: {summary['skipped']}, Errors: {summary['errors']}"
    )


if __name__ == "__main__":
    main()
