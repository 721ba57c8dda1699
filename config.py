import os
import json

API_URL = 'https://vietnamnet.vn/newsapi/Calendar/searchCalendarList'

HEADERS = {
    'accept': 'application/json, text/plain, */*',
    'accept-language': 'vi,en-US;q=0.9,en;q=0.8',
    'content-type': 'application/json',
    'origin': 'https://vietnamnet.vn',
    'referer': 'https://vietnamnet.vn/lich-van-nien',
    'user-agent': 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/142.0.0.0 Safari/537.36'
}

YEARS = [2022, 2023, 2024, 2025, 2026, 2027, 2028, 2029]

REQUEST_DELAY = 0.5   # seconds, after every request
REQUEST_TIMEOUT = None

OUTPUT_DIR = None   # current working directory
COMBINED_FILENAME = 'calendar_data.json'
YEAR_FILENAME = 'calendar_{year}.json'

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.json')


def load_config(path=CONFIG_PATH, environ=None):
    """Settings from config.json (if present), then env var overrides."""
    environ = os.environ if environ is None else environ
    settings = {
        'api_url': API_URL,
        'request_delay': REQUEST_DELAY,
        'request_timeout': REQUEST_TIMEOUT,
        'output_dir': OUTPUT_DIR or os.getcwd(),
    }
    if os.path.exists(path):
        with open(path, encoding='utf-8') as f:
            settings.update({k: v for k, v in json.load(f).items() if k in settings})

    if environ.get('CALENDAR_API_URL'):
        settings['api_url'] = environ['CALENDAR_API_URL']
    if environ.get('CALENDAR_REQUEST_DELAY'):
        settings['request_delay'] = float(environ['CALENDAR_REQUEST_DELAY'])
    if environ.get('CALENDAR_REQUEST_TIMEOUT'):
        settings['request_timeout'] = float(environ['CALENDAR_REQUEST_TIMEOUT'])
    if environ.get('CALENDAR_OUTPUT_DIR'):
        settings['output_dir'] = environ['CALENDAR_OUTPUT_DIR']
    return settings
