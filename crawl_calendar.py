"""
Crawl VietnamNet calendar data for a range of years and save it as JSON.
Usage: crawl-calendar    (years 2022-2029)
Writes calendar_data.json plus calendar_<year>.json for each year.
"""
import sys
import time
from functools import partial

import requests

import config
from calendar_source import fetch_month
from crawler import crawl_years
from storage import save_all


def main(years=None, fetch=None, sleep=time.sleep):
    try:
        settings = config.load_config()
        years = list(config.YEARS) if years is None else list(years)

        print('Starting calendar data crawl...', flush=True)
        print(f'Years to crawl: {", ".join(str(y) for y in years)}', flush=True)
        print(f'Total months: {len(years) * 12}', flush=True)

        start = time.time()
        with requests.Session() as session:
            if fetch is None:
                fetch = partial(fetch_month, url=settings['api_url'],
                                timeout=settings['request_timeout'], session=session)
            all_data = crawl_years(years, fetch=fetch, delay=settings['request_delay'], sleep=sleep)

        save_all(all_data, years, out_dir=settings['output_dir'])

        print(f'\n✓ Crawl completed in {time.time() - start:.2f} seconds', flush=True)
        return 0
    except Exception as e:
        print(f'Fatal error: {e}', file=sys.stderr, flush=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
