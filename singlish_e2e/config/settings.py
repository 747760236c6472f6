import os

class Config:
    TARGET_URL = os.getenv('TARGET_URL', 'https://www.swifttranslator.com/')
    HEADLESS = os.getenv('HEADLESS', 'true').lower() == 'true'
    PAGE_LOAD_TIMEOUT = int(os.getenv('PAGE_LOAD_TIMEOUT', 60))
    # Visibility waits for the resolved input and output fields
    INPUT_TIMEOUT = int(os.getenv('INPUT_TIMEOUT', 30))
    OUTPUT_TIMEOUT = int(os.getenv('OUTPUT_TIMEOUT', 10))
    # Translation settle heuristic, in seconds
    DEBOUNCE_WAIT = float(os.getenv('DEBOUNCE_WAIT', 2.0))
    SETTLE_INTERVAL = float(os.getenv('SETTLE_INTERVAL', 2.0))
    RETRY_WAIT = float(os.getenv('RETRY_WAIT', 3.0))
    FILL_WAIT = float(os.getenv('FILL_WAIT', 2.0))
    CLEAR_WAIT = float(os.getenv('CLEAR_WAIT', 1.0))
    FAIL_ON_NEGATIVE = os.getenv('FAIL_ON_NEGATIVE', 'false').lower() == 'true'
    CHECK_TARGET = os.getenv('CHECK_TARGET', 'true').lower() == 'true'
    RESULTS_FILE = os.getenv('RESULTS_FILE')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
