import os
import sys
import json

from config import OUTPUT_DIR, COMBINED_FILENAME, YEAR_FILENAME


def save_to_file(data, filename=COMBINED_FILENAME, out_dir=OUTPUT_DIR):
    """Write data as 2-space indented JSON. Returns the path, or None if the write failed."""
    path = os.path.join(out_dir or os.getcwd(), filename)
    try:
        text = json.dumps(data, indent=2, ensure_ascii=False)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except (OSError, TypeError, ValueError) as e:
        print(f'✗ Error saving file: {e}', file=sys.stderr, flush=True)
        return None
    print(f'\n✓ Data saved to {path}', flush=True)
    return path


def save_all(all_data, years, out_dir=OUTPUT_DIR):
    """Combined file first, then one file per year."""
    saved = [save_to_file(all_data, COMBINED_FILENAME, out_dir)]
    for year in years:
        saved.append(save_to_file(all_data.get(year, {}), YEAR_FILENAME.format(year=year), out_dir))
    return saved
