import logging
import tempfile
from typing import List

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.webdriver import WebDriver as ChromeDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

# Assign through the prototype's native setter so framework-controlled fields
# register the change, then fire the events a typing user would produce.
SET_VALUE_SCRIPT = """
    var el = arguments[0];
    var value = arguments[1];
    var proto = Object.getPrototypeOf(el);
    var descriptor = Object.getOwnPropertyDescriptor(proto, 'value');
    if (descriptor && descriptor.set) {
        descriptor.set.call(el, value);
    } else {
        el.value = value;
    }
    el.dispatchEvent(new Event('input', {bubbles: true}));
    el.dispatchEvent(new Event('change', {bubbles: true}));
"""


class SeleniumBrowser:
    """Selenium/Chrome implementation of the browser capability used by the harness.

    The resolver, poller and engine only call the methods below, so any object
    exposing the same surface (a fake in tests, another driver) can stand in.
    """

    def __init__(self, headless: bool = True, page_load_timeout: int = 60, driver=None):
        self.logger = logging.getLogger(__name__)
        self.headless = headless
        self.driver = driver or self._setup_driver(headless)
        self.driver.set_page_load_timeout(page_load_timeout)

    def _setup_driver(self, headless: bool) -> ChromeDriver:
        chrome_options = ChromeOptions()
        if headless:
            chrome_options.add_argument("--headless")
        chrome_options.add_argument("--no-sandbox")
        chrome_options.add_argument("--disable-dev-shm-usage")
        chrome_options.add_argument("--disable-blink-features=AutomationControlled")
        chrome_options.add_experimental_option("excludeSwitches", ["enable-automation"])
        chrome_options.add_experimental_option('useAutomationExtension', False)
        chrome_options.add_argument("--window-size=1920,1080")
        chrome_options.add_argument(f"--user-data-dir={tempfile.mkdtemp()}")
        chrome_options.add_argument("--user-agent=Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36")
        try:
            driver = ChromeDriver(options=chrome_options)
            self.logger.info("Chrome driver initialized successfully")
            return driver
        except Exception as e:
            self.logger.error(f"Error setting up Chrome driver: {e}")
            raise

    def navigate(self, url: str) -> None:
        self.logger.info(f"Loading URL: {url}")
        self.driver.get(url)

    def find_elements(self, by: str, value: str) -> List[WebElement]:
        return self.driver.find_elements(by, value)

    def wait_visible(self, element: WebElement, timeout: float) -> WebElement:
        if timeout <= 0:
            if not element.is_displayed():
                raise TimeoutException("Element is not visible")
            return element
        return WebDriverWait(self.driver, timeout).until(EC.visibility_of(element))

    def get_value(self, element: WebElement) -> str:
        return element.get_attribute('value') or ''

    def set_value(self, element: WebElement, text: str) -> None:
        self.driver.execute_script(SET_VALUE_SCRIPT, element, text)

    def click(self, element: WebElement) -> None:
        element.click()

    def text_content(self, element: WebElement) -> str:
        return element.get_attribute('textContent') or ''

    def close(self) -> None:
        if self.driver:
            self.driver.quit()
            self.logger.info("Browser closed.")
            self.driver = None
