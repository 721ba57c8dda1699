"""Fetch one month of calendar data from the VietnamNet calendar API."""
import sys
import requests

from config import API_URL, HEADERS, REQUEST_TIMEOUT


def fetch_month(month, year, url=API_URL, headers=HEADERS, timeout=REQUEST_TIMEOUT, session=None):
    """POST {Month, Year} and return the response body, or None on any failure.

    A body only counts when it is a JSON object with a truthy `status`.
    """
    http = session if session is not None else requests
    print(f'Crawling data for {month}/{year}...', flush=True)
    try:
        r = http.post(url, json={'Month': month, 'Year': year}, headers=headers, timeout=timeout)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        print(f'✗ Error crawling {month}/{year}: {e}', file=sys.stderr, flush=True)
        return None

    if isinstance(data, dict) and data.get('status'):
        print(f'✓ Successfully crawled {month}/{year}', flush=True)
        return data

    print(f'✗ Failed to crawl {month}/{year}: Invalid response', file=sys.stderr, flush=True)
    return None
