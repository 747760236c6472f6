import logging
import time

from selenium.common.exceptions import WebDriverException

from .errors import HarnessError, ReadFailure
from .selectors import FieldRole


class TranslationSettlePoller:
    """Approximates "translation finished" for a debounced remote translator.

    The target exposes no completion signal, so the output is sampled twice
    across a fixed interval and the second sample is taken as settled. The
    output field is looked up without a visibility wait and reused between
    samples, so worst case blocking is debounce_wait + interval + retry_wait.
    """

    def __init__(self, browser, resolver, debounce_wait: float = 2.0, interval: float = 2.0,
                 retry_wait: float = 3.0, sleep=time.sleep):
        self.browser = browser
        self.resolver = resolver
        self.debounce_wait = debounce_wait
        self.interval = interval
        self.retry_wait = retry_wait
        self._sleep = sleep
        self._resolution = None
        self.logger = logging.getLogger(__name__)

    def settle(self) -> str:
        self._resolution = None
        try:
            self._sleep(self.debounce_wait)
            first = self._read()
            self._sleep(self.interval)
            second = self._read()
            if first != second:
                self.logger.debug(f"Output still changing between samples: {first[:50]!r} -> {second[:50]!r}")
            return second
        except ReadFailure as e:
            self.logger.info(f"Waiting for translation: {e}")
        self._sleep(self.retry_wait)
        try:
            return self._read()
        except ReadFailure as e:
            self.logger.warning(f"Could not read output after retry, treating as empty: {e}")
            return ''

    def read_output(self) -> str:
        self._resolution = None
        try:
            return self._read()
        except ReadFailure as e:
            self.logger.warning(f"Could not read output: {e}")
            return ''

    def _read(self) -> str:
        try:
            if self._resolution is None:
                self._resolution = self.resolver.locate(FieldRole.OUTPUT, timeout=0)
            resolution = self._resolution
            if resolution.strategy.read_mode == 'text':
                value = self.browser.text_content(resolution.element)
            else:
                value = self.browser.get_value(resolution.element)
        except (HarnessError, WebDriverException) as e:
            self._resolution = None
            raise ReadFailure(str(e)) from e
        return (value or '').strip()
