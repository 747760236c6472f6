from __future__ import annotations

import pytest
from selenium.common.exceptions import TimeoutException, WebDriverException

from singlish_e2e.config.settings import Config
from singlish_e2e.core.selectors import CLEAR_CONTROL_STRATEGIES, INPUT_STRATEGIES, OUTPUT_STRATEGIES


class FakeElement:
    def __init__(self, name, value='', text='', visible=True, on_click=None):
        self.name = name
        self.value = value
        self.text = text
        self.visible = visible
        self.on_click = on_click
        self.fail_reads = 0

    def __repr__(self):
        return f"FakeElement({self.name!r})"


class FakeBrowser:
    """In-memory stand-in for SeleniumBrowser keyed by selector value."""

    def __init__(self, elements=None):
        self.elements = dict(elements or {})
        self.broken_selectors = set()
        self.navigations = []
        self.clicks = []
        self.wait_timeouts = []
        self.on_set = None
        self.closed = False

    def navigate(self, url):
        self.navigations.append(url)

    def find_elements(self, by, value):
        if value in self.broken_selectors:
            raise WebDriverException(f"invalid selector: {value}")
        return list(self.elements.get(value, []))

    def wait_visible(self, element, timeout):
        self.wait_timeouts.append(timeout)
        if not element.visible:
            raise TimeoutException(f"{element.name} not visible")
        return element

    def get_value(self, element):
        self._maybe_fail(element)
        return element.value

    def text_content(self, element):
        self._maybe_fail(element)
        return element.text

    def set_value(self, element, text):
        element.value = text
        if self.on_set:
            self.on_set(element, text)

    def click(self, element):
        self.clicks.append(element)
        if element.on_click:
            element.on_click()

    def close(self):
        self.closed = True

    @staticmethod
    def _maybe_fail(element):
        if element.fail_reads:
            element.fail_reads -= 1
            raise WebDriverException(f"stale element reference: {element.name}")


class FastConfig(Config):
    TARGET_URL = 'https://translator.test/'
    DEBOUNCE_WAIT = 0
    SETTLE_INTERVAL = 0
    RETRY_WAIT = 0
    FILL_WAIT = 0
    CLEAR_WAIT = 0
    CHECK_TARGET = False
    FAIL_ON_NEGATIVE = False
    RESULTS_FILE = None


INPUT_SELECTOR = INPUT_STRATEGIES[0].value
OUTPUT_SELECTOR = OUTPUT_STRATEGIES[0].value
CLEAR_SELECTOR = CLEAR_CONTROL_STRATEGIES[0].value


def build_translator_page(translate=lambda text: f"si:{text}" if text else '', with_clear=True,
                          mangle_input=None):
    """A fake page with placeholder-matched input/output fields and a clear button."""
    input_field = FakeElement('input')
    output_field = FakeElement('output')
    browser = FakeBrowser({INPUT_SELECTOR: [input_field], OUTPUT_SELECTOR: [output_field]})

    def on_set(element, text):
        if element is input_field:
            if mangle_input:
                input_field.value = mangle_input(text)
            output_field.value = translate(text)

    browser.on_set = on_set
    if with_clear:
        def clear():
            input_field.value = ''
            output_field.value = ''
        browser.elements[CLEAR_SELECTOR] = [FakeElement('clear', text='Clear', on_click=clear)]
    return browser, input_field, output_field


@pytest.fixture()
def sleeps():
    return []


@pytest.fixture()
def fake_sleep(sleeps):
    return sleeps.append


@pytest.fixture()
def translator_page():
    return build_translator_page()
