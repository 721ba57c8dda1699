"""Sequential crawl of every month in a list of years."""
import time

from calendar_source import fetch_month
from config import REQUEST_DELAY


def crawl_year(year, fetch=fetch_month, delay=REQUEST_DELAY, sleep=time.sleep):
    print(f'\n=== Crawling year {year} ===', flush=True)
    year_data = {}
    for month in range(1, 13):
        month_data = fetch(month, year)
        if month_data is not None:
            year_data[month] = month_data
        # always wait, even after the last month
        sleep(delay)
    print(f'✓ Completed year {year}', flush=True)
    return year_data


def crawl_years(years, fetch=fetch_month, delay=REQUEST_DELAY, sleep=time.sleep):
    """Return {year: {month: payload}}; failed months are simply missing."""
    all_data = {}
    for year in years:
        all_data[year] = crawl_year(year, fetch=fetch, delay=delay, sleep=sleep)
    return all_data
